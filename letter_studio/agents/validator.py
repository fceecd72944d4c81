"""
Validator — field-level checks run before a letter is generated.

Returns a mapping of field name to message for every failing rule. An
empty mapping means the record can be generated from.
"""

from __future__ import annotations

import logging
import re

from letter_studio.models import UserDetails

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = {
    "full_name": "Name is required",
    "email": "Email is required",
    "phone": "Phone is required",
    "job_title": "Job title is required",
    "company_name": "Company name is required",
}


def validate_details(details: UserDetails) -> dict[str, str]:
    """Check a details record and return its field errors."""
    errors: dict[str, str] = {}

    for name, message in REQUIRED_FIELDS.items():
        if not getattr(details, name).strip():
            errors[name] = message

    if details.email.strip() and not EMAIL_PATTERN.match(details.email):
        errors["email"] = "Invalid email format"

    # Only the first skill slot is required.
    if not details.skills or not details.skills[0].strip():
        errors["skills"] = "At least one skill is required"

    if details.linkedin and "linkedin.com" not in details.linkedin:
        errors["linkedin"] = "Please enter a valid LinkedIn URL"

    if details.portfolio and not details.portfolio.startswith("http"):
        errors["portfolio"] = "Please enter a valid portfolio URL"

    return errors


class DetailsValidator:
    """Validates details records and logs what failed."""

    def validate(self, details: UserDetails) -> dict[str, str]:
        errors = validate_details(details)
        for name, message in errors.items():
            logger.debug("Field %s failed validation: %s", name, message)
        return errors

    def is_valid(self, details: UserDetails) -> bool:
        return not self.validate(details)
