"""
Key Normalizer Module - Map Raw Key Phrases onto a Scale Vocabulary

Guidebooks describe keys loosely ("C# minor or E Major.", "Bb major / G minor").
This module turns such a phrase into one canonical vocabulary entry:
    1. Split the phrase into candidates
    2. Look each candidate up literally and in normalized form
    3. Fall back to a root + mode scan for the first candidate
    4. Fall back to the first candidate verbatim

Step 4 means the result is not always a vocabulary member. Keys are a display
field, so a readable best guess beats no answer.

Author: TrackGuide Team
"""

from typing import List, Optional, Sequence
import logging
import re

from trackguide.errors import MissingVocabularyError

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

CANDIDATE_SEPARATORS = re.compile(r",|/| or ")

# The accidental, once present, stays part of the note ("G#m7" is G#, not G)
LEADING_NOTE = re.compile(
    r"\s*([A-Ga-g](?=(?P<accidental>[#b]?))(?P=accidental))"
    r"(?=m(?:in|aj)?(?:\d|\b)|maj|dim|aug|sus|add|\d|[^a-z]|$)"
)
SHORTHAND_MINOR = re.compile(r"\s*[A-Ga-g][#b]?(?:min|m)(?![a-z])")

MINOR_WORD = re.compile(r"minor", re.IGNORECASE)
MAJOR_WORD = re.compile(r"major", re.IGNORECASE)


# =============================================================================
# CANDIDATES
# =============================================================================

def split_candidates(phrase: str) -> List[str]:
    """Split a key phrase on commas, slashes and the word 'or'."""
    candidates = []
    for part in CANDIDATE_SEPARATORS.split(phrase):
        part = part.strip()
        if part.endswith("."):
            part = part[:-1].strip()
        if part:
            candidates.append(part)
    return candidates


def is_minor(candidate: str) -> bool:
    """True for 'A minor' and for shorthand such as 'Am' or 'C#min'."""
    return "minor" in candidate.lower() or bool(SHORTHAND_MINOR.match(candidate))


def normalize_candidate(candidate: str) -> str:
    """
    Force the mode word into canonical case.

    Examples:
        "C# minor" → "C# Minor"
        "Bb major" → "Bb Major"
        "G"        → "G Major"
    """
    if " minor" in candidate.lower():
        return MINOR_WORD.sub("Minor", candidate, count=1)

    root = MAJOR_WORD.sub("Major", candidate, count=1)
    if root.endswith("Major"):
        root = root[: -len("Major")]
    return root.strip() + " Major"


def leading_root(candidate: str) -> Optional[str]:
    """Return the note the candidate starts with, e.g. 'F#' for 'F# minor'."""
    match = LEADING_NOTE.match(candidate)
    if match:
        return match.group(1)
    tokens = candidate.split()
    return tokens[0] if tokens else None


# =============================================================================
# RESOLUTION
# =============================================================================

def find_exact(candidates: Sequence[str], vocabulary: Sequence[str]) -> Optional[str]:
    """First vocabulary entry matching a candidate literally or normalized."""
    for candidate in candidates:
        if candidate in vocabulary:
            return candidate
        normalized = normalize_candidate(candidate)
        if normalized in vocabulary:
            return normalized
    return None


def find_compatible(candidate: str, vocabulary: Sequence[str]) -> Optional[str]:
    """First vocabulary entry sharing the candidate's root and mode."""
    root = leading_root(candidate)
    if not root:
        return None

    wanted_mode = "Minor" if is_minor(candidate) else "Major"
    for scale in vocabulary:
        scale_root = scale.split(" ")[0]
        if scale_root.lower() == root.lower() and wanted_mode in scale:
            return scale
    return None


def resolve_key(phrase: str, vocabulary: Optional[Sequence[str]]) -> Optional[str]:
    """
    Resolve a raw key phrase against a scale vocabulary.

    Only the first candidate is considered by the compatibility scan, so a
    valid second candidate behind an unparseable first one is never reached.

    Args:
        phrase: The matched key text, possibly holding several candidates
        vocabulary: Canonical scale names; may be empty but not None

    Returns:
        A vocabulary entry, the first candidate verbatim, or None when the
        phrase holds no candidates

    Raises:
        MissingVocabularyError: If vocabulary is None
    """
    if vocabulary is None:
        raise MissingVocabularyError()

    candidates = split_candidates(phrase)
    if not candidates:
        return None

    exact = find_exact(candidates, vocabulary)
    if exact:
        logger.debug("Key %r resolved exactly to %r", phrase, exact)
        return exact

    compatible = find_compatible(candidates[0], vocabulary)
    if compatible:
        logger.debug("Key %r resolved by root/mode scan to %r", phrase, compatible)
        return compatible

    logger.debug("Key %r not in vocabulary; returning %r verbatim", phrase, candidates[0])
    return candidates[0]
