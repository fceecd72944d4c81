"""
MCP Tool: list_templates — describe the available letter templates.
"""

from __future__ import annotations

from letter_studio.templates.registry import list_templates as registry_templates


async def list_templates() -> dict:
    """
    List the letter templates in display order.

    Returns:
        Template ids, names, descriptions, icons and static previews
    """
    return {
        "templates": [
            {
                "id": t.id,
                "name": t.name,
                "description": t.description,
                "icon": t.icon,
                "preview": t.preview,
            }
            for t in registry_templates()
        ]
    }
