"""
Rules Subpackage - Rule-based guidebook parsing

Usage:
    from trackguide.rules import extract_tempo, extract_key

    extract_tempo("Tempo: 120-130 BPM")                       # 125
    extract_key("Key: A minor", ["A Minor", "C Major"])      # 'A Minor'
"""

from trackguide.rules.sections import (
    locate_section,
    extract_all_sections,
    summarize_essential_context,
    CONTEXT_FALLBACK,
)
from trackguide.rules.guidebook_parser import (
    extract_tempo,
    extract_key,
    extract_chord_progression,
    extract_suggested_title,
    extract_time_signature,
    extract_genre,
    extract_vibe,
    extract_instruments,
    extract_arrangement,
)
from trackguide.rules.key_normalizer import resolve_key
from trackguide.rules.cleaning import strip_emphasis, clean_progression
from trackguide.rules.summary import (
    create_guidebook_summary,
    is_valid_guidebook,
    format_guidebook_content,
)

"""
INPUT:  guidebook Markdown from the text generator
                              │
                              ▼
                    ┌─────────────────┐
                    │    sections     │ → "## 1. Song Overview" ... text
                    └─────────────────┘
                              │
                              ▼
                    ┌─────────────────┐
                    │ guidebook_parser│ → bpm=125, progression='vi-IV-I-V'
                    └─────────────────┘
                              │
                              ▼
                    ┌─────────────────┐
                    │ key_normalizer  │ → key='C Minor'
                    └─────────────────┘
                              │
                              ▼
OUTPUT: GuidebookSummary for the MIDI generator and UI
"""
