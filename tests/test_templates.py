"""
Template Tests

Verifies:
1. Shared formatting: header, date, recipient block, salutation, signature
2. The registry holds formal, casual and technical, in that order
3. Formal letter content, including the exact text for a minimal record
4. Casual first-name greeting, portfolio call-out and sign-off
5. Technical profile block and the achievement fallback
6. Generation is deterministic for a fixed date
"""

from datetime import date

import pytest

from letter_studio.errors import UnknownTemplateError
from letter_studio.models import TemplateStyle, UserDetails
from letter_studio.templates.formatting import (
    format_date,
    format_header,
    format_recipient,
    format_signature,
)
from letter_studio.templates.registry import TEMPLATES, get_template, list_templates

LETTER_DAY = date(2025, 3, 5)


# =============================================================================
# SHARED FORMATTING
# =============================================================================

class TestFormatting:

    def test_header_with_all_contact_fields(self, full_details):
        assert format_header(full_details) == (
            "Sam Rivera | sam.rivera@example.com | +1 415 555 0199 | "
            "LinkedIn: https://www.linkedin.com/in/samrivera | "
            "Portfolio: https://samrivera.dev"
        )

    def test_header_skips_missing_fields(self):
        assert format_header(UserDetails(full_name="Jane Doe", phone="555")) == "Jane Doe | 555"

    @pytest.mark.parametrize("day,expected", [
        (date(2025, 3, 5), "March 5, 2025"),
        (date(2024, 12, 31), "December 31, 2024"),
        (date(2026, 1, 1), "January 1, 2026"),
    ])
    def test_date_format(self, day, expected):
        assert format_date(day) == expected

    def test_recipient_block_empty_without_recipient_fields(self, jane):
        assert format_recipient(jane) == ""

    def test_recipient_block_with_all_fields(self, full_details):
        assert format_recipient(full_details) == (
            "\n\nAlex Morgan\nHead of Data\nNorthwind\n1 Harbor Way, Seattle, WA"
        )

    def test_recipient_block_address_only(self, jane):
        jane.company_address = "9 Main St"
        assert format_recipient(jane) == "\n\nAcme\n9 Main St"

    def test_recipient_block_ignores_whitespace_fields(self, jane):
        jane.recipient_name = "   "
        jane.recipient_title = "\t"
        jane.company_address = " "
        assert format_recipient(jane) == ""

    def test_recipient_block_trims_fields(self, jane):
        jane.recipient_name = "  Alex Morgan "
        jane.recipient_title = "   "
        assert format_recipient(jane) == "\n\nAlex Morgan"

    def test_signature(self, jane):
        assert format_signature(jane, "Best regards") == "Best regards,\nJane Doe"
        jane.custom_signature = "Sincerely"
        assert format_signature(jane, "Best regards") == "Sincerely,\nJane Doe"

    def test_signature_with_sign_off(self, jane):
        assert format_signature(jane, "Looking forward to connecting!", "Cheers") == (
            "Looking forward to connecting!\n\nCheers,\nJane Doe"
        )


# =============================================================================
# REGISTRY
# =============================================================================

class TestRegistry:

    def test_fixed_order(self):
        assert [t.style for t in TEMPLATES] == [
            TemplateStyle.FORMAL, TemplateStyle.CASUAL, TemplateStyle.TECHNICAL,
        ]
        assert [t.id for t in list_templates()] == ["formal", "casual", "technical"]

    def test_lookup_by_style_or_id(self):
        assert get_template(TemplateStyle.CASUAL) is get_template("casual")
        assert get_template(" Technical ").style is TemplateStyle.TECHNICAL

    def test_unknown_id(self):
        with pytest.raises(UnknownTemplateError):
            get_template("poetic")

    def test_templates_are_immutable(self):
        with pytest.raises(AttributeError):
            TEMPLATES[0].name = "Changed"

    def test_metadata(self):
        formal = get_template("formal")
        assert formal.name == "Formal & Professional"
        assert formal.icon == "Briefcase"
        assert formal.preview.startswith("[Your Name]")


# =============================================================================
# FORMAL
# =============================================================================

class TestFormal:

    def test_minimal_letter_exact(self, jane):
        letter = get_template("formal").generate(jane, LETTER_DAY)
        assert letter == (
            "Jane Doe | jane@x.com | 555-1234\n"
            "\n"
            "March 5, 2025\n"
            "\n"
            "Dear Hiring Manager,\n"
            "\n"
            "I am writing to express my strong interest in the Engineer position at Acme. "
            "With my background in Go, Rust, I am confident in my ability to contribute "
            "meaningfully to your team.\n"
            "\n"
            "Throughout my career, I have developed expertise in Go and Rust, which aligns "
            "perfectly with the requirements of this role. I am particularly drawn to "
            "Acme's reputation for excellence and innovation in the industry.\n"
            "\n"
            "I would welcome the opportunity to discuss how my skills and experience could "
            "benefit Acme. Thank you for considering my application.\n"
            "\n"
            "Best regards,\n"
            "Jane Doe"
        )

    def test_minimal_record_key_lines(self, jane):
        letter = get_template("formal").generate(jane, LETTER_DAY)
        assert "jane@x.com" in letter.split("\n")[0]
        assert "Dear Hiring Manager," in letter
        assert "Engineer position at Acme" in letter
        assert letter.endswith("Best regards,\nJane Doe")

    def test_no_blank_line_runs_without_recipient(self, jane):
        letter = get_template("formal").generate(jane, LETTER_DAY)
        assert "March 5, 2025\n\nDear Hiring Manager," in letter
        assert "\n\n\n" not in letter

    def test_full_record(self, full_details):
        letter = get_template("formal").generate(full_details, LETTER_DAY)
        assert (
            "March 5, 2025\n\nAlex Morgan\nHead of Data\nNorthwind\n"
            "1 Harbor Way, Seattle, WA\n\nDear Alex Morgan,"
        ) in letter
        assert "Key achievements include:\n• Cut pipeline runtime by 40%\n• Led migration to dbt" in letter
        assert "\n\nFour years building batch and streaming pipelines.\n\n" in letter
        assert "\n\nB.Sc. Computer Science\n\n" in letter
        assert "expertise in Python and SQL," in letter
        assert "\n\n\n" not in letter

    def test_custom_salutation_and_signature(self, jane):
        jane.salutation = "Hello"
        jane.custom_signature = "Kind regards"
        letter = get_template("formal").generate(jane, LETTER_DAY)
        assert "Hello Hiring Manager," in letter
        assert letter.endswith("Kind regards,\nJane Doe")

    def test_blank_achievements_render_nothing(self, jane):
        jane.achievements = ["", "  "]
        assert "Key achievements" not in get_template("formal").generate(jane, LETTER_DAY)


# =============================================================================
# CASUAL
# =============================================================================

class TestCasual:

    def test_defaults(self, jane):
        letter = get_template("casual").generate(jane, LETTER_DAY)
        assert "Hi there," in letter
        assert "I'm Jane Doe, and I'm excited about the Engineer role at Acme!" in letter
        assert "My experience with Go, Rust has prepared me" in letter
        assert "my background in Go could help drive Acme's mission forward." in letter
        assert letter.endswith("Looking forward to connecting!\n\nCheers,\nJane Doe")

    def test_uses_recipient_first_name(self, full_details):
        letter = get_template("casual").generate(full_details, LETTER_DAY)
        assert "Hi Alex," in letter
        assert "Alex Morgan," not in letter

    def test_optional_sections(self, full_details):
        letter = get_template("casual").generate(full_details, LETTER_DAY)
        assert "Some highlights of what I've accomplished:\n• Cut pipeline runtime by 40%" in letter
        assert "My educational background in B.Sc. Computer Science has given me" in letter
        assert "You can check out more of my work at my portfolio: https://samrivera.dev" in letter

    def test_custom_signature_keeps_cheers(self, jane):
        jane.custom_signature = "Talk soon!"
        letter = get_template("casual").generate(jane, LETTER_DAY)
        assert letter.endswith("Talk soon!\n\nCheers,\nJane Doe")


# =============================================================================
# TECHNICAL
# =============================================================================

class TestTechnical:

    def test_profile_block(self, full_details):
        letter = get_template("technical").generate(full_details, LETTER_DAY)
        assert "RE: Application for Data Engineer Position" in letter
        assert (
            "Technical Profile:\n"
            "- Core Competencies: Python, SQL, Airflow, Spark\n"
            "- Position of Interest: Data Engineer\n"
            "- Target Organization: Northwind\n"
            "- Education: B.Sc. Computer Science\n"
            "- Portfolio: https://samrivera.dev\n"
            "- LinkedIn: https://www.linkedin.com/in/samrivera"
        ) in letter

    def test_profile_block_skips_missing_lines(self, jane):
        letter = get_template("technical").generate(jane, LETTER_DAY)
        assert "- Target Organization: Acme\n\nI am a results-driven professional" in letter
        assert "- Education" not in letter

    def test_listed_achievements(self, full_details):
        letter = get_template("technical").generate(full_details, LETTER_DAY)
        assert "Key Technical Achievements:\n• Cut pipeline runtime by 40%\n• Led migration to dbt" in letter

    def test_achievement_fallback_from_skills(self, jane):
        jane.achievements = []
        letter = get_template("technical").generate(jane, LETTER_DAY)
        assert "Key Technical Achievements:\nDemonstrated proficiency in Go and Rust." in letter
        assert "• " not in letter

    def test_fallback_mentions_remaining_skills(self, jane):
        jane.achievements = [""]
        jane.skills = ["Go", "Rust", "Kafka", "Postgres"]
        letter = get_template("technical").generate(jane, LETTER_DAY)
        assert (
            "Demonstrated proficiency in Go and Rust. "
            "Successfully implemented solutions using Kafka, Postgres."
        ) in letter

    def test_fallback_with_single_skill(self, jane):
        jane.skills = ["Go"]
        letter = get_template("technical").generate(jane, LETTER_DAY)
        assert "Demonstrated proficiency in Go." in letter

    def test_defaults(self, jane):
        letter = get_template("technical").generate(jane, LETTER_DAY)
        assert "Dear Hiring Team," in letter
        assert letter.endswith("Technical regards,\nJane Doe")


# =============================================================================
# PROPERTIES
# =============================================================================

class TestProperties:

    @pytest.mark.parametrize("style", list(TemplateStyle))
    def test_contains_name_and_company(self, jane, style):
        letter = get_template(style).generate(jane, LETTER_DAY)
        assert letter
        assert "Jane Doe" in letter
        assert "Acme" in letter

    @pytest.mark.parametrize("style", list(TemplateStyle))
    def test_deterministic_for_fixed_date(self, full_details, style):
        template = get_template(style)
        assert template.generate(full_details, LETTER_DAY) == template.generate(full_details, LETTER_DAY)

    @pytest.mark.parametrize("style", list(TemplateStyle))
    def test_generation_does_not_modify_record(self, full_details, style):
        before = full_details.to_dict()
        get_template(style).generate(full_details, LETTER_DAY)
        assert full_details.to_dict() == before

    @pytest.mark.parametrize("style", list(TemplateStyle))
    def test_empty_skills_do_not_crash(self, jane, style):
        jane.skills = []
        assert "Jane Doe" in get_template(style).generate(jane, LETTER_DAY)

    @pytest.mark.parametrize("style,greeting", [
        ("formal", "Dear Hiring Manager,"),
        ("casual", "Hi there,"),
        ("technical", "Dear Hiring Team,"),
    ])
    def test_whitespace_recipient_uses_fallback(self, jane, style, greeting):
        jane.recipient_name = "   "
        letter = get_template(style).generate(jane, LETTER_DAY)
        assert greeting in letter
        assert "\n\n\n" not in letter
