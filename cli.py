"""
Cover Letter Studio — CLI Entry Point

Typer-based CLI for generating cover letters from a details file.
Provides the same operations as the MCP server, plus an interactive
session with version history.

Usage:
    letter-studio --help
    letter-studio templates
    letter-studio preview technical
    letter-studio validate details.json
    letter-studio generate details.json --template casual --output letter.txt
    letter-studio stats letter.txt
    letter-studio session details.json
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from letter_studio.agents.letter_generator import LetterGenerator
from letter_studio.agents.validator import DetailsValidator
from letter_studio.config import configure_logging, default_template, details_path
from letter_studio.errors import UnknownTemplateError, ValidationError, VersionIndexError
from letter_studio.models import LetterStats, TemplateStyle, UserDetails
from letter_studio.services.details_loader import load_details
from letter_studio.services.doc_exporter import EXPORT_FORMATS, LetterExporter
from letter_studio.services.session import LetterSession
from letter_studio.services.stats import calculate_stats
from letter_studio.templates.registry import get_template, list_templates, to_style

app = typer.Typer(
    name="letter-studio",
    help="Template-driven cover letter generator with version history.",
    add_completion=False,
)
console = Console()

DETAIL_FIELDS = [f.name for f in fields(UserDetails)]


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: LOG_LEVEL or WARNING)"),
):
    """Cover Letter Studio."""
    configure_logging(log_level.upper() if log_level else None)


def _resolve_details_path(file_path: str | None) -> str:
    """Resolve the details path from the argument or LETTER_DETAILS_PATH."""
    path = file_path or details_path()
    if not path:
        raise typer.BadParameter(
            "Provide a details JSON file or set LETTER_DETAILS_PATH in .env"
        )
    return path


def _load(file_path: str | None) -> UserDetails:
    path = _resolve_details_path(file_path)
    try:
        return load_details(path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Could not read details: {e}[/]")
        raise typer.Exit(1)


def _style(template: str) -> TemplateStyle:
    try:
        return to_style(template)
    except UnknownTemplateError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)


def _print_errors(errors: dict[str, str]) -> None:
    table = Table(title="❌ Details need attention")
    table.add_column("Field", style="bold")
    table.add_column("Problem")
    for name, message in errors.items():
        table.add_row(name, message)
    console.print(table)


def _show_letter(letter: str, title: str) -> None:
    """Print letter text in a panel, with no markup interpretation."""
    console.print(Panel(Text(letter), title=title))


def _print_stats(stats: LetterStats) -> None:
    console.print(
        f"Characters: {stats.characters}  "
        f"Words: {stats.words}  "
        f"Readability: {stats.readability_score}/10"
    )


# ── Template Commands ────────────────────────────────────────

@app.command()
def templates():
    """List the available letter templates."""
    table = Table(title="📋 Templates")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Description")

    for template in list_templates():
        table.add_row(template.id, template.name, template.description)

    console.print(table)


@app.command()
def preview(
    template: str = typer.Argument(..., help="Template id: formal/casual/technical"),
):
    """Show a template's static example."""
    selected = get_template(_style(template))
    _show_letter(selected.preview, f"{selected.name} — example")


# ── Letter Commands ──────────────────────────────────────────

@app.command()
def validate(
    file_path: str = typer.Argument(None, help="Details JSON file. Falls back to LETTER_DETAILS_PATH env var."),
):
    """Check a details file for missing or malformed fields."""
    details = _load(file_path)
    errors = DetailsValidator().validate(details)

    if errors:
        _print_errors(errors)
        raise typer.Exit(1)

    console.print("[bold green]✅ Details are complete[/]")


@app.command()
def generate(
    file_path: str = typer.Argument(None, help="Details JSON file. Falls back to LETTER_DETAILS_PATH env var."),
    template: str = typer.Option(None, "--template", "-t", help="Template: formal/casual/technical"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Save the letter to this file"),
    fmt: str = typer.Option("txt", "--format", "-f", help="Export format: txt/docx"),
):
    """Generate a cover letter from a details file."""
    details = _load(file_path)
    style = _style(template or default_template())
    if fmt.lower() not in EXPORT_FORMATS:
        console.print(f"[red]Unsupported format '{fmt}'. Use: {', '.join(EXPORT_FORMATS)}[/]")
        raise typer.Exit(1)

    try:
        letter = LetterGenerator().generate(style, details)
    except ValidationError as e:
        _print_errors(e.errors)
        raise typer.Exit(1)

    _show_letter(letter, f"Cover Letter — {details.company_name} {details.job_title}")
    _print_stats(calculate_stats(letter))

    if output:
        target = Path(output)
        exporter = LetterExporter(target.parent)
        path = exporter.export(letter, details, fmt=fmt, filename=target.name)
        console.print(f"📄 Saved to {path}")


@app.command()
def stats(
    file_path: str = typer.Argument(..., help="Letter text file"),
):
    """Show character, word and readability figures for a letter."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Could not read {file_path}: {e}[/]")
        raise typer.Exit(1)

    _print_stats(calculate_stats(text))


# ── Interactive Session ──────────────────────────────────────

SESSION_HELP = """Commands:
  generate               validate and generate with the selected template
  preview <template>     show the letter in another template
  confirm                switch to the previewed template and generate
  template <template>    select a template
  set <field> <value>    edit a field (skills/achievements: comma-separated)
  show                   show the current details
  history                list generated versions
  restore <n>            restore version n
  stats                  statistics for the current letter
  export [txt|docx]      save the current letter
  quit                   leave the session"""


def _show_details(details: UserDetails) -> None:
    table = Table(title="Details")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in details.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(v for v in value if v)
        table.add_row(name, value)
    console.print(table)


def _show_history(session: LetterSession) -> None:
    summaries = session.list_versions()
    if not summaries:
        console.print("No versions yet. Use 'generate'.")
        return

    table = Table(title="🕘 Version History")
    table.add_column("#", style="bold")
    table.add_column("Created")
    table.add_column("Template")
    table.add_column("Characters", justify="right")

    current = session.versions.current_index
    for summary in summaries:
        marker = " ◀" if summary.index == current else ""
        table.add_row(
            f"{summary.index}{marker}",
            summary.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S"),
            summary.template.value,
            str(summary.characters),
        )
    console.print(table)


def _set_field(details: UserDetails, name: str, value: str) -> None:
    if name in ("skills", "achievements"):
        items = [item.strip() for item in value.split(",")]
        setattr(details, name, items or [""])
    else:
        setattr(details, name, value)


def _run_command(session: LetterSession, line: str) -> bool:
    """Run one session command. Returns False when the session should end."""
    command, _, rest = line.strip().partition(" ")
    rest = rest.strip()

    if command in ("quit", "exit", "q"):
        return False

    if command == "generate":
        try:
            letter = session.submit()
        except ValidationError as e:
            _print_errors(e.errors)
            return True
        _show_letter(letter, f"Version {session.versions.current_index} — {session.selected_template.value}")

    elif command == "preview":
        try:
            letter = session.preview_template(rest)
        except UnknownTemplateError as e:
            console.print(f"[red]{e}[/]")
            return True
        _show_letter(letter, f"Preview — {session.preview_style.value}")
        console.print("Use 'confirm' to switch to this template.")

    elif command == "confirm":
        try:
            letter = session.confirm_template()
        except ValidationError as e:
            _print_errors(e.errors)
            return True
        _show_letter(letter, f"Version {session.versions.current_index} — {session.selected_template.value}")

    elif command == "template":
        try:
            session.selected_template = to_style(rest)
        except UnknownTemplateError as e:
            console.print(f"[red]{e}[/]")
            return True
        console.print(f"Template: {session.selected_template.value}")

    elif command == "set":
        name, _, value = rest.partition(" ")
        if name not in DETAIL_FIELDS:
            console.print(f"[red]Unknown field '{name}'. Fields: {', '.join(DETAIL_FIELDS)}[/]")
            return True
        _set_field(session.details, name, value.strip())

    elif command == "show":
        _show_details(session.details)

    elif command == "history":
        _show_history(session)

    elif command == "restore":
        try:
            _, style, letter = session.restore_version(int(rest))
        except ValueError:
            console.print("[red]Usage: restore <n>[/]")
            return True
        except VersionIndexError as e:
            console.print(f"[red]{e}[/]")
            return True
        _show_letter(letter, f"Restored version {rest} — {style.value}")

    elif command == "stats":
        _print_stats(session.stats())

    elif command == "export":
        if not session.generated_letter:
            console.print("[yellow]Nothing to export yet. Use 'generate'.[/]")
            return True
        fmt = rest or "txt"
        try:
            path = LetterExporter().export(session.generated_letter, session.details, fmt=fmt)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            return True
        console.print(f"📄 Saved to {path}")

    elif command in ("help", "?"):
        console.print(SESSION_HELP, markup=False)

    elif command:
        console.print(f"[red]Unknown command '{command}'.[/] Type 'help'.")

    return True


@app.command()
def session(
    file_path: Optional[str] = typer.Argument(None, help="Details JSON file to start from"),
    template: str = typer.Option(None, "--template", "-t", help="Template: formal/casual/technical"),
):
    """Edit details and generate letters interactively, with version history."""
    path = file_path or details_path()
    details = _load(path) if path else UserDetails()
    letter_session = LetterSession(template=_style(template or default_template()), details=details)
    console.print(Panel(Text(SESSION_HELP), title="✉️  Cover Letter Studio"))
    while True:
        line = typer.prompt(f"[{letter_session.selected_template.value}]", default="", show_default=False)
        if not _run_command(letter_session, line):
            break

    console.print(f"Session ended with {len(letter_session.versions)} version(s).")


# ── Entry Point ──────────────────────────────────────────────

if __name__ == "__main__":
    app()
