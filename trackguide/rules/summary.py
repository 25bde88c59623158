"""
Summary Module - Whole-Guidebook Helpers

Combines the individual extractors into one GuidebookSummary, checks whether a
document looks like a guidebook at all, and tidies guidebook Markdown for
display.

Author: TrackGuide Team
"""

from typing import Optional, Sequence
import logging
import re

from trackguide.config import get_settings
from trackguide.data.schema import GuidebookSummary
from trackguide.rules.guidebook_parser import (
    extract_arrangement,
    extract_chord_progression,
    extract_genre,
    extract_instruments,
    extract_key,
    extract_suggested_title,
    extract_tempo,
    extract_time_signature,
    extract_vibe,
)

logger = logging.getLogger(__name__)

MUSICAL_KEYWORDS = re.compile(r"(?:bpm|tempo|chord|key|genre|style)", re.IGNORECASE)
HAS_HEADING = re.compile(r"^##\s+", re.MULTILINE)


def create_guidebook_summary(
    document: str,
    scale_vocabulary: Optional[Sequence[str]] = None,
) -> GuidebookSummary:
    """
    Run every extractor over a guidebook.

    Without a vocabulary the key is resolved against an empty one, so it comes
    back as the raw key phrase.
    """
    summary = GuidebookSummary(
        bpm=extract_tempo(document),
        key=extract_key(document, scale_vocabulary if scale_vocabulary is not None else []),
        time_signature=extract_time_signature(document),
        genre=extract_genre(document),
        vibe=extract_vibe(document),
        chord_progression=extract_chord_progression(document),
        title=extract_suggested_title(document),
        instruments=extract_instruments(document),
        arrangement=extract_arrangement(document),
    )
    logger.debug("Guidebook summary: %s", summary)
    return summary


def is_valid_guidebook(document: str) -> bool:
    """Check that a document has the shape of a generated guidebook."""
    settings = get_settings()
    if not document or len(document.strip()) < settings.min_guidebook_chars:
        return False

    has_headings = bool(HAS_HEADING.search(document))
    has_musical_content = bool(MUSICAL_KEYWORDS.search(document))
    has_structure = len(document.split("\n")) > settings.min_guidebook_lines

    return has_headings and has_musical_content and has_structure


def format_guidebook_content(document: str) -> str:
    """Normalize line endings and heading spacing of guidebook Markdown."""
    text = document.replace("\r\n", "\n")
    text = re.sub(r"^##[ \t]+", "## ", text, flags=re.MULTILINE)
    text = re.sub(r"^(##.+)$", r"\1\n", text, flags=re.MULTILINE)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
