"""
Models — the records that flow through letter generation.

UserDetails is the live, editable form record. LetterVersion is the
immutable snapshot taken each time a letter is recorded; it owns its own
deep copy of the details so later edits never reach back into history.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any


class TemplateStyle(str, Enum):
    """The closed set of letter templates."""

    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"

    @classmethod
    def values(cls) -> list[str]:
        return [style.value for style in cls]


# camelCase names used by the web form, mapped to field names.
_CAMEL_CASE_KEYS = {
    "fullName": "full_name",
    "jobTitle": "job_title",
    "companyName": "company_name",
    "linkedIn": "linkedin",
    "customSignature": "custom_signature",
    "recipientName": "recipient_name",
    "recipientTitle": "recipient_title",
    "companyAddress": "company_address",
}

_LIST_FIELDS = ("skills", "achievements")


@dataclass
class UserDetails:
    """Applicant and target-job details entered through the form."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    job_title: str = ""
    company_name: str = ""
    skills: list[str] = field(default_factory=lambda: [""])
    achievements: list[str] = field(default_factory=lambda: [""])
    experience: str = ""
    education: str = ""
    linkedin: str = ""
    portfolio: str = ""
    custom_signature: str = ""
    salutation: str = ""
    recipient_name: str = ""
    recipient_title: str = ""
    company_address: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserDetails:
        """
        Build a record from a mapping of field values.

        Accepts snake_case keys or the camelCase names of the web
        form. Unknown keys are ignored and missing ones keep their blank
        defaults. A bare string for skills or achievements is treated as
        a single entry.

        Raises:
            ValueError: if skills or achievements is neither a string nor
                a list.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            if name in _LIST_FIELDS:
                if isinstance(value, str):
                    value = [value]
                elif not isinstance(value, (list, tuple)):
                    raise ValueError(f"{name} must be a list of strings")
                value = [str(item) for item in value]
            else:
                value = str(value)
            kwargs[name] = value

        details = cls(**kwargs)
        if not details.skills:
            details.skills = [""]
        return details

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = list(value) if f.name in _LIST_FIELDS else value
        return result

    def copy(self) -> UserDetails:
        """Deep copy, sharing no lists with this record."""
        return copy.deepcopy(self)

    def listed_skills(self) -> list[str]:
        """Non-blank skills, trimmed, in the order entered."""
        return [s.strip() for s in self.skills if s.strip()]

    def listed_achievements(self) -> list[str]:
        """Non-blank achievements, trimmed, in the order entered."""
        return [a.strip() for a in self.achievements if a.strip()]

    # ── Form editing ─────────────────────────────────────────

    def set_skill(self, index: int, value: str) -> None:
        self.skills[index] = value

    def add_skill(self, value: str = "") -> None:
        self.skills.append(value)

    def remove_skill(self, index: int) -> None:
        """Remove a skill slot; the list never drops below one slot."""
        del self.skills[index]
        if not self.skills:
            self.skills = [""]

    def set_achievement(self, index: int, value: str) -> None:
        self.achievements[index] = value

    def add_achievement(self, value: str = "") -> None:
        self.achievements.append(value)

    def remove_achievement(self, index: int) -> None:
        del self.achievements[index]
        if not self.achievements:
            self.achievements = [""]


@dataclass(frozen=True)
class LetterVersion:
    """One recorded generation: when, which template, what text, from what input."""

    timestamp: datetime
    letter: str
    template: TemplateStyle
    details: UserDetails

    @property
    def letter_date(self) -> date:
        """The date printed on the letter: the local calendar day of `timestamp`."""
        return self.timestamp.astimezone().date()

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "letter": self.letter,
            "template": self.template.value,
            "details": self.details.to_dict(),
        }


@dataclass(frozen=True)
class VersionSummary:
    """Display row for the version history list."""

    index: int
    timestamp: datetime
    template: TemplateStyle
    characters: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "timestamp": self.timestamp.isoformat(),
            "template": self.template.value,
            "characters": self.characters,
        }


@dataclass(frozen=True)
class LetterStats:
    characters: int
    words: int
    readability_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "characters": self.characters,
            "words": self.words,
            "readability_score": self.readability_score,
        }
