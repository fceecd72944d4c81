"""
Letter Stats — size and a rough readability score for a letter.

The readability score is a word-length heuristic on a 1-10 scale: an
average word of four characters scores 10, and every extra character of
average length costs two points.
"""

from __future__ import annotations

from letter_studio.models import LetterStats


def calculate_stats(text: str) -> LetterStats:
    characters = len(text)
    words = len(text.split())
    if not words:
        return LetterStats(characters=characters, words=0, readability_score=10.0)

    avg_word_length = characters / words
    score = max(1.0, min(10.0, 10 - (avg_word_length - 4) * 2))
    return LetterStats(
        characters=characters,
        words=words,
        readability_score=round(score, 1),
    )
