"""
Errors — the recoverable failures raised by the letter core.

Every error here is local: the action that raised it is blocked, and no
session or history state is changed.
"""

from __future__ import annotations


class LetterStudioError(Exception):
    """Base class for letter studio errors."""


class ValidationError(LetterStudioError):
    """The details record failed one or more field rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid details: {fields}")


class VersionIndexError(LetterStudioError, IndexError):
    """A version index outside the recorded history."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size:
            hint = f"valid range is 0-{size - 1}"
        else:
            hint = "no versions recorded yet"
        super().__init__(f"Version {index} does not exist ({hint})")


class UnknownTemplateError(LetterStudioError, ValueError):
    """A template id outside the closed set of styles."""

    def __init__(self, template_id: str, known: list[str]) -> None:
        self.template_id = template_id
        super().__init__(
            f"Unknown template '{template_id}'. Use: {', '.join(known)}"
        )
