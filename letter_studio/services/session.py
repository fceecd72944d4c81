"""
Letter Session — the state one user edits, generates and restores.

The session owns the live details record, the selected template, the
letter currently on screen and the version history. The presentation
layer (CLI or MCP server) holds a session and drives it with direct
calls; the generation core stays stateless.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable

from letter_studio.agents.letter_generator import LetterGenerator
from letter_studio.agents.validator import validate_details
from letter_studio.models import (
    LetterStats,
    LetterVersion,
    TemplateStyle,
    UserDetails,
    VersionSummary,
)
from letter_studio.services.stats import calculate_stats
from letter_studio.storage.version_store import VersionStore
from letter_studio.templates.registry import to_style

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LetterSession:
    """Live details, selected template, current letter and version history."""

    def __init__(
        self,
        template: TemplateStyle | str = TemplateStyle.FORMAL,
        details: UserDetails | None = None,
        generator: LetterGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.details = details or UserDetails()
        self.selected_template = to_style(template)
        self.generated_letter = ""
        self.preview_style: TemplateStyle | None = None
        self._generator = generator or LetterGenerator()
        self._clock = clock or utc_now
        self._store = VersionStore()

    @property
    def versions(self) -> VersionStore:
        return self._store

    # ── Core operations ──────────────────────────────────────

    def generate(self, style: TemplateStyle | str, details: UserDetails | None = None) -> str:
        """Render a letter without validating or recording it."""
        details = details or self.details
        return self._generator.preview(style, details, self._today())

    def validate(self, details: UserDetails | None = None) -> dict[str, str]:
        return validate_details(details or self.details)

    def submit(self) -> str:
        """
        Generate from the live details with the selected template and record it.

        Raises:
            ValidationError: if the live details are invalid; nothing is
                generated or recorded.
        """
        now = self._clock()
        letter = self._generator.generate(
            self.selected_template, self.details, now.astimezone().date()
        )
        self.generated_letter = letter
        self.preview_style = None
        self._record(self.selected_template, self.details, letter, now)
        return letter

    def record_version(
        self,
        style: TemplateStyle | str,
        details: UserDetails,
        letter: str,
    ) -> int:
        """Append a snapshot of an already generated letter. Returns its index."""
        return self._record(to_style(style), details, letter, self._clock())

    def list_versions(self) -> list[VersionSummary]:
        return self._store.summaries()

    def restore_version(self, index: int) -> tuple[UserDetails, TemplateStyle, str]:
        """
        Make a recorded version the live state again.

        Raises:
            VersionIndexError: if `index` is not in the history; the
                session is left unchanged.
        """
        version = self._store.restore(index)
        self.details = version.details.copy()
        self.selected_template = version.template
        self.generated_letter = version.letter
        self.preview_style = None
        return self.details.copy(), version.template, version.letter

    # ── Template preview ─────────────────────────────────────

    def preview_template(self, style: TemplateStyle | str) -> str:
        """Show the live details in another style without switching to it."""
        self.preview_style = to_style(style)
        self.generated_letter = self.generate(self.preview_style)
        return self.generated_letter

    def confirm_template(self) -> str:
        """Adopt the previewed style and submit with it."""
        if self.preview_style is not None:
            self.selected_template = self.preview_style
        return self.submit()

    def stats(self) -> LetterStats:
        return calculate_stats(self.generated_letter)

    # ── Internals ────────────────────────────────────────────

    def _today(self) -> date:
        return self._clock().astimezone().date()

    def _record(
        self,
        style: TemplateStyle,
        details: UserDetails,
        letter: str,
        timestamp: datetime,
    ) -> int:
        version = LetterVersion(
            timestamp=timestamp,
            letter=letter,
            template=style,
            details=details.copy(),
        )
        return self._store.append(version)
