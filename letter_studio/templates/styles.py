"""
Template styles — the body prose of each letter template.

Each builder takes the details record, its cleaned skill list and the
rendered achievements section, and returns the body paragraphs in order.
Empty strings stand for optional paragraphs that have nothing to say.
"""

from __future__ import annotations

from letter_studio.models import UserDetails
from letter_studio.templates.formatting import first_skill, join_skills


def formal_body(details: UserDetails, skills: list[str], achievements: str) -> list[str]:
    company = details.company_name
    return [
        (
            f"I am writing to express my strong interest in the {details.job_title} "
            f"position at {company}. With my background in {join_skills(skills)}, "
            "I am confident in my ability to contribute meaningfully to your team."
        ),
        details.experience,
        (
            "Throughout my career, I have developed expertise in "
            f"{join_skills(skills, 2, ' and ')}, which aligns perfectly with the "
            f"requirements of this role. I am particularly drawn to {company}'s "
            "reputation for excellence and innovation in the industry."
        ),
        achievements,
        details.education,
        (
            "I would welcome the opportunity to discuss how my skills and experience "
            f"could benefit {company}. Thank you for considering my application."
        ),
    ]


def casual_body(details: UserDetails, skills: list[str], achievements: str) -> list[str]:
    company = details.company_name
    education = ""
    if details.education:
        education = (
            f"My educational background in {details.education} has given me a "
            "solid foundation in this field."
        )
    portfolio = ""
    if details.portfolio:
        portfolio = f"You can check out more of my work at my portfolio: {details.portfolio}"

    return [
        (
            f"I'm {details.full_name}, and I'm excited about the {details.job_title} "
            f"role at {company}!"
        ),
        (
            f"What draws me to {company} is your innovative approach to solving real "
            f"problems. My experience with {join_skills(skills)} has prepared me to "
            "jump right in and make an impact."
        ),
        details.experience,
        achievements,
        education,
        portfolio,
        (
            f"I'd love to chat about how my background in {first_skill(skills)} "
            f"could help drive {company}'s mission forward."
        ),
    ]


def technical_body(details: UserDetails, skills: list[str], achievements: str) -> list[str]:
    company = details.company_name
    profile = [
        "Technical Profile:",
        f"- Core Competencies: {join_skills(skills)}",
        f"- Position of Interest: {details.job_title}",
        f"- Target Organization: {company}",
    ]
    if details.education:
        profile.append(f"- Education: {details.education}")
    if details.portfolio:
        profile.append(f"- Portfolio: {details.portfolio}")
    if details.linkedin:
        profile.append(f"- LinkedIn: {details.linkedin}")

    return [
        f"RE: Application for {details.job_title} Position",
        "\n".join(profile),
        (
            "I am a results-driven professional with demonstrated expertise in "
            f"{join_skills(skills)}. My technical background and problem-solving "
            f"approach align with {company}'s technical requirements."
        ),
        details.experience,
        achievements,
        (
            "I welcome the opportunity to discuss how my technical proficiency can "
            f"contribute to {company}'s objectives."
        ),
    ]


def synthesize_technical_achievements(skills: list[str]) -> str:
    """Stand-in achievement sentence drawn from the first listed skills."""
    if not skills:
        return ""
    sentence = f"Demonstrated proficiency in {join_skills(skills, 2, ' and ')}."
    if len(skills) > 2:
        sentence += f" Successfully implemented solutions using {join_skills(skills[2:])}."
    return sentence
