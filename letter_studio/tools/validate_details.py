"""
MCP Tool: validate_details — check a details record before generating.
"""

from __future__ import annotations

from letter_studio.agents.validator import validate_details as check_details
from letter_studio.models import UserDetails


async def validate_details(details: dict) -> dict:
    """
    Validate applicant and job details.

    Args:
        details: Field values (snake_case or camelCase keys)

    Returns:
        valid flag and a field → message mapping of errors
    """
    try:
        record = UserDetails.from_dict(details)
    except ValueError as e:
        return {"error": str(e)}

    errors = check_details(record)
    return {"valid": not errors, "errors": errors}
