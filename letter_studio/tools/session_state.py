"""
Session state shared by the MCP tools.

The server is single-user and in-memory: one LetterSession lives for the
lifetime of the process.
"""

from __future__ import annotations

from letter_studio.config import default_template
from letter_studio.services.session import LetterSession

_session: LetterSession | None = None


def get_session() -> LetterSession:
    global _session
    if _session is None:
        _session = LetterSession(template=default_template())
    return _session


def reset_session() -> LetterSession:
    """Start over with an empty history."""
    global _session
    _session = LetterSession(template=default_template())
    return _session
