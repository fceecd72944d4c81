"""
Formatting — the letter pieces every template shares.

Header, date, recipient block, salutation, bullet lists and signature are
built the same way for all styles; only the defaults handed in differ.
"""

from __future__ import annotations

from datetime import date

from letter_studio.models import UserDetails

# Fixed English month names so the date never follows the process locale.
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

BULLET = "• "


def format_header(details: UserDetails) -> str:
    """Contact line: name, then whichever of email/phone/links are set."""
    parts = [details.full_name]
    if details.email:
        parts.append(details.email)
    if details.phone:
        parts.append(details.phone)
    if details.linkedin:
        parts.append(f"LinkedIn: {details.linkedin}")
    if details.portfolio:
        parts.append(f"Portfolio: {details.portfolio}")
    return " | ".join(parts)


def format_date(today: date | None = None) -> str:
    """Long-form date, e.g. "March 5, 2025"."""
    today = today or date.today()
    return f"{MONTH_NAMES[today.month - 1]} {today.day}, {today.year}"


def format_recipient(details: UserDetails) -> str:
    """
    Recipient address block, or "" when every recipient field is blank.

    The block carries its own leading blank line; the caller adds the one
    after it, as it does when the block is empty.
    """
    name = details.recipient_name.strip()
    title = details.recipient_title.strip()
    address = details.company_address.strip()
    if not (name or title or address):
        return ""

    lines: list[str] = []
    if name:
        lines.append(name)
    if title:
        lines.append(title)
    if address:
        lines.append(details.company_name)
        lines.append(address)

    return "\n\n" + "\n".join(lines)


def format_salutation(details: UserDetails, default: str, recipient: str) -> str:
    return f"{details.salutation or default} {recipient},"


def format_bullets(items: list[str]) -> str:
    return "\n".join(f"{BULLET}{item}" for item in items)


def format_signature(details: UserDetails, default: str, sign_off: str | None = None) -> str:
    """Closing line and name; `sign_off` adds a second line such as "Cheers"."""
    if sign_off:
        return f"{details.custom_signature or default}\n\n{sign_off},\n{details.full_name}"
    return f"{details.custom_signature or default},\n{details.full_name}"


def join_skills(skills: list[str], limit: int | None = None, sep: str = ", ") -> str:
    """Join skills in entry order, optionally only the first `limit`."""
    if limit is not None:
        skills = skills[:limit]
    return sep.join(skills)


def first_skill(skills: list[str]) -> str:
    return skills[0] if skills else ""


def assemble(opening: str, paragraphs: list[str]) -> str:
    """
    Join the letter opening and its body paragraphs.

    Empty paragraphs are dropped so optional sections never leave runs
    of blank lines behind.
    """
    body = "\n\n".join(p for p in paragraphs if p)
    return f"{opening}\n\n{body}"
