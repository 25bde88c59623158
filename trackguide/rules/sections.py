"""
Sections Module - Locate Named Parts of a Guidebook

Guidebooks are Markdown documents whose top-level parts open with "## "
headings, e.g. "## 1. Song Overview". A section runs from its heading up to
the next top-level heading (or the end of the document).

Author: TrackGuide Team
"""

from typing import Dict, Union
import logging
import re

from trackguide.data.schema import Section

logger = logging.getLogger(__name__)


# =============================================================================
# HEADING PATTERNS
# =============================================================================

TOP_LEVEL_HEADING = re.compile(r"^##\s+", re.MULTILINE)
HEADING_TITLE = re.compile(r"^##[ \t]+(.+?)$", re.MULTILINE)

# Fixed headings emitted by the guidebook generator
OVERVIEW_HEADING = re.compile(r"^##\s*1\.\s*Song Overview", re.IGNORECASE | re.MULTILINE)
HARMONY_HEADING = re.compile(
    r"^##\s*4\.\s*Harmony, Melody & Rhythmic Core", re.IGNORECASE | re.MULTILINE
)

CONTEXT_FALLBACK = "General musical context not fully parsed. Focus on genre and vibe."


def compile_heading(heading_pattern: Union[str, re.Pattern]) -> re.Pattern:
    """Compile a heading regex as case-insensitive and anchored to line start."""
    if isinstance(heading_pattern, str):
        if not heading_pattern.startswith("^"):
            heading_pattern = "^" + heading_pattern
        return re.compile(heading_pattern, re.IGNORECASE | re.MULTILINE)
    return heading_pattern


# =============================================================================
# LOCATING SECTIONS
# =============================================================================

def _section_from(document: str, start: int, heading_end: int) -> Section:
    next_heading = TOP_LEVEL_HEADING.search(document, heading_end)
    end = next_heading.start() if next_heading else len(document)
    return Section(start=start, end=end, text=document[start:end].strip())


def locate_section(document: str, heading_pattern: Union[str, re.Pattern]) -> Section:
    """
    Find the section opened by the first heading matching heading_pattern.

    Nested headings are not special-cased: the first "## " line after the
    match closes the section whatever its depth in the outline.

    Args:
        document: Full guidebook text
        heading_pattern: Regex for the opening heading. A string is compiled
            case-insensitive and anchored to line start; a compiled pattern
            is used as given, with its own flags and anchoring

    Returns:
        The located Section, or Section.empty() if the heading is absent

    Example:
        >>> doc = "## 1. Song Overview\\nfoo\\n## 2. Next\\nbar"
        >>> locate_section(doc, r"##\\s*1\\.").text
        '## 1. Song Overview\\nfoo'
    """
    match = compile_heading(heading_pattern).search(document)
    if not match:
        return Section.empty()
    return _section_from(document, match.start(), match.end())


def extract_all_sections(document: str) -> Dict[str, str]:
    """Map every top-level heading title to its section text, in order."""
    sections = {}
    for match in HEADING_TITLE.finditer(document):
        title = match.group(1).strip()
        if title not in sections:
            sections[title] = _section_from(document, match.start(), match.end()).text
    return sections


# =============================================================================
# CONTEXT SUMMARY
# =============================================================================

def summarize_essential_context(document: str) -> str:
    """
    Condense a guidebook to the two sections that matter for MIDI prompts.

    The overview comes first, then the harmony section, separated by a blank
    line. Never returns an empty string.
    """
    overview = locate_section(document, OVERVIEW_HEADING).text
    harmony = locate_section(document, HARMONY_HEADING).text

    context = (overview + "\n\n" + harmony).strip()
    if not context:
        logger.debug("Neither overview nor harmony section found; using fallback context")
        return CONTEXT_FALLBACK
    return context
