"""
Guidebook Parser Module - Extract Musical Parameters from Guidebook Prose

This module mines typed values out of the Markdown guidebooks written by the
generator:
    - Tempo (e.g., "Tempo: 120-130 BPM" → 125)
    - Key (e.g., "Suggested Key(s) / Scale(s): C Minor" → "C Minor")
    - Chord progression (e.g., "Chord Progression(s): vi-IV-I-V" → "vi-IV-I-V")
    - Suggested title, time signature, genre, vibe, instruments, arrangement

Each field is tried against an ordered list of patterns. The first pattern
that matches anywhere in the document decides the result; later patterns are
never consulted. A field nobody mentions comes back as None.

Author: TrackGuide Team
"""

from typing import List, Optional, Sequence
import logging
import re

from trackguide.rules.cleaning import (
    PROGRESSION_TOKEN_CHARS,
    clean_progression,
    strip_emphasis,
    strip_trailing_punctuation,
)
from trackguide.rules.key_normalizer import resolve_key
from trackguide.errors import MissingVocabularyError

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERN CASCADES (highest priority first)
# =============================================================================

_RANGE = r"(\d+)\s*(?:-|–|to)\s*(\d+)"

TEMPO_PATTERNS = [
    re.compile(rf"Tempo.*?{_RANGE}\s*BPM", re.IGNORECASE),
    re.compile(rf"BPM.*?{_RANGE}", re.IGNORECASE),
    re.compile(rf"{_RANGE}\s*BPM", re.IGNORECASE),
    re.compile(r"Tempo.*?(\d+)\s*BPM", re.IGNORECASE),
    re.compile(r"BPM.*?(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*BPM", re.IGNORECASE),
]

_NOTE_AND_MODE = r"[A-G][#b]?\s*(?:Major|Minor)\b"

KEY_PATTERNS = [
    re.compile(
        r"Suggested Keys?(?:\(s\))?\s*/\s*Scales?(?:\(s\))?:(?:\*\*)?\s*([^(\n]+)",
        re.IGNORECASE,
    ),
    re.compile(rf"Key.*?:(?:\*\*)?\s*({_NOTE_AND_MODE})", re.IGNORECASE),
    re.compile(rf"\b({_NOTE_AND_MODE})", re.IGNORECASE),
]

CHORD_PROGRESSION_PATTERNS = [
    re.compile(r"Chord Progressions?(?:\(s\))?\s*(?:\([^)]+\))?:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Progressions?(?:\(s\))?:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(rf"Chords?:(?:\*\*)?\s*([{PROGRESSION_TOKEN_CHARS}-][^\n]*)", re.IGNORECASE),
    re.compile(r"([ivclxmd]+(?:\s*-\s*[ivclxmd]+){2,})", re.IGNORECASE),
]

TITLE_PATTERN = re.compile(
    r"^\s*-\s*\*\*Suggested Title:\*\*[ \t]*(.*)", re.IGNORECASE | re.MULTILINE
)

TIME_SIGNATURE_PATTERNS = [
    re.compile(r"Time\s*Signature:(?:\*\*)?\s*(\d+/\d+)", re.IGNORECASE),
    re.compile(r"(\d+/\d+)\s*time", re.IGNORECASE),
    re.compile(r"\bin\s+(\d+/\d+)", re.IGNORECASE),
]

GENRE_PATTERNS = [
    re.compile(r"Genre:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Style:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Musical\s*Style:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
]

VIBE_PATTERNS = [
    re.compile(r"Vibe:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Mood:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Feel:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Energy:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
]

INSTRUMENT_PATTERNS = [
    re.compile(r"Instruments?:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Instrumentation:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Track\s*List:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
]

ARRANGEMENT_PATTERNS = [
    re.compile(r"(?:Song\s*)?Structure:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Arrangement:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"Form:(?:\*\*)?\s*([^\n]+)", re.IGNORECASE),
]


def _first_match(patterns: Sequence[re.Pattern], document: str) -> Optional[re.Match]:
    for index, pattern in enumerate(patterns):
        match = pattern.search(document)
        if match:
            logger.debug("Pattern %d (%s) matched %r", index, pattern.pattern, match.group(0))
            return match
    return None


def _label_value(patterns: Sequence[re.Pattern], document: str) -> Optional[str]:
    match = _first_match(patterns, document)
    if not match:
        return None
    value = strip_trailing_punctuation(strip_emphasis(match.group(1)))
    return value or None


def _label_list(patterns: Sequence[re.Pattern], document: str, separators: str) -> List[str]:
    match = _first_match(patterns, document)
    if not match:
        return []
    items = re.split(separators, strip_emphasis(match.group(1)))
    return [item.strip() for item in items if item.strip()]


# =============================================================================
# CORE EXTRACTORS
# =============================================================================

def extract_tempo(document: str) -> Optional[int]:
    """
    Extract the tempo in BPM.

    A range resolves to its mean, rounded half up ("120-131 BPM" → 126).
    No plausibility check is applied to the number.
    """
    match = _first_match(TEMPO_PATTERNS, document)
    if not match:
        return None

    if match.lastindex and match.lastindex >= 2:
        low, high = int(match.group(1)), int(match.group(2))
        return (low + high + 1) // 2
    return int(match.group(1))


def extract_key(document: str, scale_vocabulary: Sequence[str]) -> Optional[str]:
    """
    Extract the suggested key and resolve it against a scale vocabulary.

    The result is a vocabulary entry whenever one fits; otherwise the first
    key phrase is returned verbatim rather than dropped.

    Raises:
        MissingVocabularyError: If scale_vocabulary is None
    """
    if scale_vocabulary is None:
        raise MissingVocabularyError()

    for pattern in KEY_PATTERNS:
        match = pattern.search(document)
        if not match:
            continue
        key = resolve_key(match.group(1), scale_vocabulary)
        if key:
            logger.debug("Key pattern %s matched %r", pattern.pattern, match.group(1))
            return key
    return None


def extract_chord_progression(document: str) -> Optional[str]:
    """
    Extract the first chord progression named in the guidebook.

    Trailing prose on the matched line is discarded and, when several
    progressions are listed, only the first one is returned.
    """
    for pattern in CHORD_PROGRESSION_PATTERNS:
        match = pattern.search(document)
        if not match:
            continue
        progression = clean_progression(match.group(1))
        if progression:
            logger.debug("Progression pattern %s gave %r", pattern.pattern, progression)
            return progression
    return None


def extract_suggested_title(document: str) -> Optional[str]:
    """Extract the value of the '- **Suggested Title:**' list item."""
    match = TITLE_PATTERN.search(document)
    if not match:
        return None
    title = strip_emphasis(match.group(1))
    return title or None


# =============================================================================
# SUPPLEMENTARY EXTRACTORS
# =============================================================================

def extract_time_signature(document: str) -> Optional[str]:
    match = _first_match(TIME_SIGNATURE_PATTERNS, document)
    return match.group(1) if match else None


def extract_genre(document: str) -> Optional[str]:
    return _label_value(GENRE_PATTERNS, document)


def extract_vibe(document: str) -> Optional[str]:
    return _label_value(VIBE_PATTERNS, document)


def extract_instruments(document: str) -> List[str]:
    """Instrument names from the first instrument label, split on , and ;"""
    return _label_list(INSTRUMENT_PATTERNS, document, r"[,;]")


def extract_arrangement(document: str) -> List[str]:
    """Song sections from the first structure label, split on -, , and >"""
    return _label_list(ARRANGEMENT_PATTERNS, document, r"[-,>]")
