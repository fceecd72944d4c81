"""
Version Store — append-only history of generated letters.

Entries are only ever appended; there is no deletion or compaction. The
store keeps its own copies: versions go in and come out as fresh snapshots,
so no caller can reach the recorded details. A
cursor marks the current version: it follows each append and can be moved
back by restoring an earlier entry.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator

from letter_studio.errors import VersionIndexError
from letter_studio.models import LetterVersion, VersionSummary

logger = logging.getLogger(__name__)


def _snapshot(version: LetterVersion) -> LetterVersion:
    """Copy of a version whose details share nothing with the stored one."""
    return replace(version, details=version.details.copy())


class VersionStore:
    """Ordered log of LetterVersion snapshots with a current-index cursor."""

    def __init__(self) -> None:
        self._versions: list[LetterVersion] = []
        self._current = -1

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[LetterVersion]:
        return iter(self.versions())

    @property
    def current_index(self) -> int:
        """Index of the current version, or -1 when nothing is recorded."""
        return self._current

    @property
    def current(self) -> LetterVersion | None:
        if self._current < 0:
            return None
        return _snapshot(self._versions[self._current])

    def append(self, version: LetterVersion) -> int:
        """Add a version at the end and make it current. Returns its index."""
        self._versions.append(_snapshot(version))
        self._current = len(self._versions) - 1
        logger.info(
            "Recorded version %d (%s, %d chars)",
            self._current, version.template.value, len(version.letter),
        )
        return self._current

    def get(self, index: int) -> LetterVersion:
        """Look up a version without moving the cursor."""
        self._check_index(index)
        return _snapshot(self._versions[index])

    def restore(self, index: int) -> LetterVersion:
        """
        Make the version at `index` current and return it.

        Raises:
            VersionIndexError: if `index` is outside the history. The
                cursor and the history are left untouched.
        """
        self._check_index(index)
        self._current = index
        logger.info("Restored version %d", index)
        return _snapshot(self._versions[index])

    def versions(self) -> tuple[LetterVersion, ...]:
        return tuple(_snapshot(v) for v in self._versions)

    def summaries(self) -> list[VersionSummary]:
        return [
            VersionSummary(
                index=i,
                timestamp=v.timestamp,
                template=v.template,
                characters=len(v.letter),
            )
            for i, v in enumerate(self._versions)
        ]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._versions):
            logger.warning("Version %s requested, %d recorded", index, len(self._versions))
            raise VersionIndexError(index, len(self._versions))
