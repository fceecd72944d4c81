"""
Letter Generator — validates a details record and renders a template.

Generation is blocked on any validation error: the template is only
invoked for records that pass every field rule. Previews skip the check
so the presentation layer can show work in progress.
"""

from __future__ import annotations

import logging
from datetime import date

from letter_studio.agents.validator import DetailsValidator
from letter_studio.errors import ValidationError
from letter_studio.models import TemplateStyle, UserDetails
from letter_studio.templates.registry import get_template

logger = logging.getLogger(__name__)


class LetterGenerator:
    """Turns validated details into letter text."""

    def __init__(self, validator: DetailsValidator | None = None) -> None:
        self._validator = validator or DetailsValidator()

    def generate(
        self,
        style: TemplateStyle | str,
        details: UserDetails,
        today: date | None = None,
    ) -> str:
        """
        Generate a letter after validating the details.

        Args:
            style: Template style or its id string
            details: The details record to render
            today: Date to print on the letter (defaults to the current date)

        Returns:
            The letter text

        Raises:
            ValidationError: if any field fails validation
            UnknownTemplateError: if `style` names no template
        """
        template = get_template(style)
        errors = self._validator.validate(details)
        if errors:
            logger.info("Generation blocked, %d invalid field(s)", len(errors))
            raise ValidationError(errors)

        return template.generate(details, today)

    def preview(
        self,
        style: TemplateStyle | str,
        details: UserDetails,
        today: date | None = None,
    ) -> str:
        """Render without validating, for a live preview."""
        return get_template(style).generate(details, today)
