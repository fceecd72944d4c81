"""
Template Registry — the fixed, ordered set of letter templates.

Templates are defined once at import. Dispatch is keyed by TemplateStyle,
and the table is checked against the enum so a new style cannot be added
without a template to go with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable

from letter_studio.errors import UnknownTemplateError
from letter_studio.models import TemplateStyle, UserDetails
from letter_studio.templates import styles
from letter_studio.templates.formatting import (
    assemble,
    format_bullets,
    format_date,
    format_header,
    format_recipient,
    format_salutation,
    format_signature,
)

BodyBuilder = Callable[[UserDetails, list[str], str], list[str]]


def full_recipient(name: str) -> str:
    return name


def first_name_recipient(name: str) -> str:
    return name.split()[0] if name.strip() else ""


@dataclass(frozen=True)
class TemplateProfile:
    """Per-template defaults that the shared formatting fills in."""

    default_salutation: str
    fallback_recipient: str
    default_signature: str
    achievements_heading: str
    sign_off: str | None = None
    recipient_display: Callable[[str], str] = full_recipient
    achievement_fallback: Callable[[list[str]], str] | None = None


@dataclass(frozen=True)
class Template:
    """A named, pure text-generation strategy over UserDetails."""

    style: TemplateStyle
    name: str
    description: str
    icon: str
    preview: str
    profile: TemplateProfile
    body: BodyBuilder

    @property
    def id(self) -> str:
        return self.style.value

    def generate(self, details: UserDetails, today: date | None = None) -> str:
        """Render the letter for `details`, dated `today` (default: the current date)."""
        profile = self.profile
        skills = details.listed_skills()

        recipient = profile.recipient_display(details.recipient_name.strip()) or profile.fallback_recipient
        opening = (
            f"{format_header(details)}\n\n"
            f"{format_date(today)}{format_recipient(details)}\n\n"
            f"{format_salutation(details, profile.default_salutation, recipient)}"
        )

        paragraphs = self.body(details, skills, self._achievements(details, skills))
        paragraphs.append(format_signature(details, profile.default_signature, profile.sign_off))
        return assemble(opening, paragraphs)

    def _achievements(self, details: UserDetails, skills: list[str]) -> str:
        achievements = details.listed_achievements()
        if achievements:
            items = format_bullets(achievements)
        elif self.profile.achievement_fallback:
            items = self.profile.achievement_fallback(skills)
        else:
            return ""
        return f"{self.profile.achievements_heading}\n{items}" if items else ""


FORMAL_PREVIEW = """[Your Name] | [Email] | [Phone] | [LinkedIn]

[Recipient Name]
[Job Title]
[Company]
[Address]

Dear [Recipient Name],

I am writing to express my strong interest in the [Position] at [Company]...

Throughout my career, I have developed expertise in [Skills], which aligns perfectly with the requirements of this role...

Best regards,
[Your Name]"""

CASUAL_PREVIEW = """[Your Name] | [Contact Details] | [Portfolio]

Hi [Name],

I'm [Your Name], and I'm excited about the [Position] role at [Company]!

What draws me to [Company] is your innovative approach...

Looking forward to connecting!"""

TECHNICAL_PREVIEW = """[Professional Header with Contact Details]

Technical Profile:
- Core Competencies: [Skills]
- Position of Interest: [Position]
- Target Organization: [Company]

I am a results-driven professional..."""


TEMPLATES: tuple[Template, ...] = (
    Template(
        style=TemplateStyle.FORMAL,
        name="Formal & Professional",
        description="Perfect for corporate roles and traditional industries",
        icon="Briefcase",
        preview=FORMAL_PREVIEW,
        profile=TemplateProfile(
            default_salutation="Dear",
            fallback_recipient="Hiring Manager",
            default_signature="Best regards",
            achievements_heading="Key achievements include:",
        ),
        body=styles.formal_body,
    ),
    Template(
        style=TemplateStyle.CASUAL,
        name="Casual & Creative",
        description="Great for startups and creative industries",
        icon="Palette",
        preview=CASUAL_PREVIEW,
        profile=TemplateProfile(
            default_salutation="Hi",
            fallback_recipient="there",
            default_signature="Looking forward to connecting!",
            sign_off="Cheers",
            achievements_heading="Some highlights of what I've accomplished:",
            recipient_display=first_name_recipient,
        ),
        body=styles.casual_body,
    ),
    Template(
        style=TemplateStyle.TECHNICAL,
        name="Technical & Data-Driven",
        description="Ideal for engineering and analytical roles",
        icon="Code2",
        preview=TECHNICAL_PREVIEW,
        profile=TemplateProfile(
            default_salutation="Dear",
            fallback_recipient="Hiring Team",
            default_signature="Technical regards",
            achievements_heading="Key Technical Achievements:",
            achievement_fallback=styles.synthesize_technical_achievements,
        ),
        body=styles.technical_body,
    ),
)

_BY_STYLE: dict[TemplateStyle, Template] = {t.style: t for t in TEMPLATES}

_missing = set(TemplateStyle) - set(_BY_STYLE)
if _missing:
    raise RuntimeError(f"No template defined for: {sorted(s.value for s in _missing)}")


def to_style(template_id: TemplateStyle | str) -> TemplateStyle:
    """Resolve a template id string to its style."""
    if isinstance(template_id, TemplateStyle):
        return template_id
    try:
        return TemplateStyle(template_id.strip().lower())
    except ValueError:
        raise UnknownTemplateError(template_id, TemplateStyle.values()) from None


def get_template(template_id: TemplateStyle | str) -> Template:
    return _BY_STYLE[to_style(template_id)]


def list_templates() -> list[Template]:
    return list(TEMPLATES)
