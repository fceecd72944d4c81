"""
Letter Exporter — writes a letter to a plain-text or DOCX file.

Plain text is written as UTF-8, unchanged. DOCX output uses python-docx,
one paragraph per line, with "•" lines rendered as list bullets.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from docx import Document
from docx.shared import Inches, Pt

from letter_studio.config import outputs_dir
from letter_studio.models import UserDetails
from letter_studio.templates.formatting import BULLET

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("txt", "docx")


class LetterExporter:
    """Exports letter text to files in the outputs directory."""

    def __init__(self, output_dir: str | Path | None = None) -> None:
        self._output_dir = Path(output_dir or outputs_dir())
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def export(
        self,
        letter: str,
        details: UserDetails | None = None,
        fmt: str = "txt",
        filename: str | None = None,
    ) -> str:
        """
        Export a letter to a file.

        Args:
            letter: The letter text
            details: Details record (for auto-naming)
            fmt: "txt" or "docx"
            filename: Custom filename (auto-generated if None)

        Returns:
            Absolute path to the created file
        """
        fmt = fmt.lower()
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported format '{fmt}'. Use: {', '.join(EXPORT_FORMATS)}")

        if not filename:
            filename = self._generate_filename(details, fmt)
        output_path = self._output_dir / filename

        if fmt == "txt":
            output_path.write_text(letter, encoding="utf-8")
        else:
            self._build_docx(letter).save(str(output_path))

        logger.info("Exported letter to %s", output_path)
        return str(output_path.resolve())

    def _build_docx(self, letter: str) -> Document:
        doc = Document()

        for section in doc.sections:
            section.top_margin = Inches(1)
            section.bottom_margin = Inches(1)
            section.left_margin = Inches(1)
            section.right_margin = Inches(1)

        for line in letter.split("\n"):
            if line.startswith(BULLET):
                para = doc.add_paragraph(line[len(BULLET):], style="List Bullet")
            else:
                para = doc.add_paragraph(line)
            para.paragraph_format.space_after = Pt(0)

        return doc

    def _generate_filename(self, details: UserDetails | None, fmt: str) -> str:
        """Build a descriptive filename from the applicant and job."""
        parts = []

        if details and details.full_name.strip():
            parts.append(details.full_name.strip().replace(" ", "_"))
        if details and details.company_name.strip():
            parts.append(details.company_name.strip().replace(" ", "_"))
        if details and details.job_title.strip():
            parts.append(details.job_title.strip().replace(" ", "_"))

        parts.append("cover_letter")
        parts.append(datetime.now().strftime("%Y%m%d"))

        filename = "_".join(parts)
        filename = "".join(c for c in filename if c.isalnum() or c in "_-.")
        return f"{filename}.{fmt}"
