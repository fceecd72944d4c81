"""
Cover Letter Studio — MCP Server Entry Point

FastMCP server that exposes letter generation and version history as
tools for any MCP-compatible AI assistant. History lives in memory for
the lifetime of the server process.

Usage:
    # Direct run
    python server.py

    # Via package entry point
    letter-studio-server
"""

from __future__ import annotations

from fastmcp import FastMCP

from letter_studio.config import configure_logging
from letter_studio.tools.generate_letter import generate_letter, submit_letter
from letter_studio.tools.letter_stats import letter_stats
from letter_studio.tools.list_templates import list_templates
from letter_studio.tools.validate_details import validate_details
from letter_studio.tools.versions import list_versions, record_version, restore_version


# Create the MCP server
mcp = FastMCP("Cover Letter Studio")


# ── Template Tools ───────────────────────────────────────────

@mcp.tool()
async def tool_list_templates() -> dict:
    """List the letter templates: formal, casual and technical."""
    return await list_templates()


@mcp.tool()
async def tool_validate_details(details: dict) -> dict:
    """Check applicant and job details; returns field errors if any."""
    return await validate_details(details)


# ── Generation Tools ─────────────────────────────────────────

@mcp.tool()
async def tool_generate_letter(details: dict, template: str = "formal") -> dict:
    """Preview a cover letter for the details. Not validated, not recorded."""
    return await generate_letter(details, template)


@mcp.tool()
async def tool_submit_letter(details: dict, template: str = "formal") -> dict:
    """Validate details, generate the cover letter and record it as a version."""
    return await submit_letter(details, template)


@mcp.tool()
async def tool_letter_stats(text: str) -> dict:
    """Count characters and words and score readability of a letter."""
    return await letter_stats(text)


# ── Version History ──────────────────────────────────────────

@mcp.tool()
async def tool_record_version(details: dict, template: str, letter: str) -> dict:
    """Record an already generated letter in the version history."""
    return await record_version(details, template, letter)


@mcp.tool()
async def tool_list_versions() -> dict:
    """List the letters recorded this session, oldest first."""
    return await list_versions()


@mcp.tool()
async def tool_restore_version(index: int) -> dict:
    """Restore a recorded version's details, template and letter."""
    return await restore_version(index)


def main() -> None:
    configure_logging()
    mcp.run()


# ── Server Entry Point ──────────────────────────────────────

if __name__ == "__main__":
    main()
