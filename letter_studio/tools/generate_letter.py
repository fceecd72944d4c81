"""
MCP Tools: generate_letter / submit_letter — render cover letters.
"""

from __future__ import annotations

from letter_studio.errors import ValidationError
from letter_studio.models import UserDetails
from letter_studio.services.stats import calculate_stats
from letter_studio.templates.registry import to_style
from letter_studio.tools.session_state import get_session


async def generate_letter(details: dict, template: str = "formal") -> dict:
    """
    Render a letter as a preview. Nothing is validated or recorded.

    Args:
        details: Field values (snake_case or camelCase keys)
        template: Template id — "formal", "casual", or "technical"

    Returns:
        The letter text with its statistics
    """
    session = get_session()
    try:
        style = to_style(template)
        record = UserDetails.from_dict(details)
    except ValueError as e:
        return {"error": str(e)}

    letter = session.generate(style, record)
    return {
        "template": style.value,
        "letter": letter,
        "stats": calculate_stats(letter).to_dict(),
    }


async def submit_letter(details: dict, template: str = "formal") -> dict:
    """
    Validate the details, generate the letter and record it as a version.

    Args:
        details: Field values (snake_case or camelCase keys)
        template: Template id — "formal", "casual", or "technical"

    Returns:
        The letter, its version index and statistics, or the field errors
    """
    session = get_session()
    try:
        style = to_style(template)
        record = UserDetails.from_dict(details)
    except ValueError as e:
        return {"error": str(e)}

    session.selected_template = style
    session.details = record
    try:
        letter = session.submit()
    except ValidationError as e:
        return {"error": "Details failed validation", "errors": e.errors}

    return {
        "template": style.value,
        "letter": letter,
        "version": session.versions.current_index,
        "stats": session.stats().to_dict(),
    }
