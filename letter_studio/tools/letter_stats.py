"""
MCP Tool: letter_stats — character, word and readability figures.
"""

from __future__ import annotations

from letter_studio.services.stats import calculate_stats


async def letter_stats(text: str) -> dict:
    """
    Measure a letter.

    Args:
        text: The letter text

    Returns:
        characters, words and a 1-10 readability score
    """
    return calculate_stats(text).to_dict()
