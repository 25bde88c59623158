"""
Cleaning Module - Tidy Matched Fragments Before Returning Them

The generator decorates its Markdown with bold/italic markers and tends to
run prose on after a value. These helpers remove that decoration:
    - strip_emphasis: "**Neon Rain**" → "Neon Rain"
    - strip_trailing_punctuation: "Synthwave." → "Synthwave"
    - clean_progression: "vi-IV-I-V, nice and simple." → "vi-IV-I-V"

Author: TrackGuide Team
"""

from typing import Optional
import re


# =============================================================================
# PROGRESSION TOKENS
# =============================================================================

# Characters a progression token may contain: roman numerals (both cases),
# accidentals, diminished/half-diminished/augmented markers, slash chords,
# suspensions and extension digits.
PROGRESSION_TOKEN_CHARS = r"ivclxmdIVCLXMDab#ø°dimaug\d/sus"

# The first hyphen-joined run of tokens in a fragment
PROGRESSION_RUN = re.compile(
    rf"[{PROGRESSION_TOKEN_CHARS}-]+(?:\s*-\s*[{PROGRESSION_TOKEN_CHARS}-]+)*"
)

# Only the first listed progression is kept
PROGRESSION_SEPARATORS = [", ", ". ", "; "]

BOLD_MARKUP = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_MARKUP = re.compile(r"\*([^*]+)\*")


# =============================================================================
# CLEANING FUNCTIONS
# =============================================================================

def strip_emphasis(text: str) -> str:
    """Remove paired **bold** and *italic* markers, keeping the inner text."""
    text = BOLD_MARKUP.sub(r"\1", text.strip())
    return ITALIC_MARKUP.sub(r"\1", text)


def strip_trailing_punctuation(text: str, chars: str = ".,;") -> str:
    """Trim the fragment and drop a single trailing punctuation mark."""
    text = text.strip()
    if text and text[-1] in chars:
        text = text[:-1]
    return text.strip()


def clean_progression(fragment: str) -> Optional[str]:
    """
    Reduce a matched line to the single progression it starts with.

    Returns None when the fragment holds no progression tokens at all.
    """
    # A lone hyphen (list bullet, dash) is not a progression
    runs = (m.group(0).strip() for m in PROGRESSION_RUN.finditer(fragment))
    progression = next((r for r in runs if r.strip("- ")), None)
    if progression is None:
        return None

    if progression.endswith("."):
        progression = progression[:-1]

    for separator in PROGRESSION_SEPARATORS:
        if separator in progression:
            progression = progression.split(separator)[0].strip()
            break

    return progression or None
