"""
MCP Tools: record_version / list_versions / restore_version — letter history.
"""

from __future__ import annotations

from letter_studio.errors import VersionIndexError
from letter_studio.models import UserDetails
from letter_studio.tools.session_state import get_session


async def record_version(details: dict, template: str, letter: str) -> dict:
    """
    Record an already generated letter in the session history.

    Args:
        details: The field values the letter was generated from
        template: Template id the letter was generated with
        letter: The letter text

    Returns:
        The new version index
    """
    session = get_session()
    try:
        index = session.record_version(template, UserDetails.from_dict(details), letter)
    except ValueError as e:
        return {"error": str(e)}
    return {"version": index, "total_versions": len(session.versions)}


async def list_versions() -> dict:
    """
    List the letters recorded this session, oldest first.

    Returns:
        Version summaries (index, timestamp, template, characters) and
        the current version index
    """
    session = get_session()
    return {
        "versions": [s.to_dict() for s in session.list_versions()],
        "current_index": session.versions.current_index,
    }


async def restore_version(index: int) -> dict:
    """
    Restore a recorded version as the live details, template and letter.

    Args:
        index: Version index from list_versions

    Returns:
        The restored details, template and letter text
    """
    session = get_session()
    try:
        details, style, letter = session.restore_version(index)
    except VersionIndexError as e:
        return {"error": str(e), "total_versions": len(session.versions)}

    return {
        "version": index,
        "details": details.to_dict(),
        "template": style.value,
        "letter": letter,
    }
