"""
Schema definitions for values extracted from TrackGuide guidebooks.

This module defines the Pydantic models returned by the parsing rules.
Every model is frozen: results are built fresh for each call and are never
mutated afterwards.

Author: TrackGuide Team
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# SCALE VOCABULARY (the generator's standard list of keys)
# =============================================================================

# Offered for callers that have no vocabulary of their own.
# No extractor reads this implicitly; pass it explicitly to extract_key().
DEFAULT_SCALES = [
    "C Major", "G Major", "D Major", "A Major", "E Major", "B Major", "F# Major", "C# Major",
    "F Major", "Bb Major", "Eb Major", "Ab Major", "Db Major", "Gb Major", "Cb Major",
    "A Minor", "E Minor", "B Minor", "F# Minor", "C# Minor", "G# Minor", "D# Minor", "A# Minor",
    "D Minor", "G Minor", "C Minor", "F Minor", "Bb Minor", "Eb Minor", "Ab Minor",
]


# =============================================================================
# SECTION
# =============================================================================

class Section(BaseModel):
    """
    A located slice of a guidebook document.

    Attributes:
        start: Offset of the heading that opens the section
        end: Offset where the next top-level heading (or the document) begins
        text: The slice between start and end, whitespace-trimmed

    Example:
        >>> doc = "## 1. Song Overview\\nfoo\\n## 2. Next\\nbar"
        >>> section = Section(start=0, end=24, text=doc[0:24].strip())
        >>> section.text
        '## 1. Song Overview\\nfoo'
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(
        default=0,
        ge=0,
        description="Offset of the section heading within the document",
    )

    end: int = Field(
        default=0,
        ge=0,
        description="Offset (exclusive) where the section stops",
    )

    text: str = Field(
        default="",
        description="Trimmed section content, heading included",
    )

    @model_validator(mode="after")
    def check_offsets(self) -> "Section":
        """Ensure the section does not end before it starts"""
        if self.end < self.start:
            raise ValueError(
                f"Section end ({self.end}) must not precede its start ({self.start})"
            )
        return self

    @classmethod
    def empty(cls) -> "Section":
        return cls(start=0, end=0, text="")

    def __bool__(self) -> bool:
        return bool(self.text)

    def __str__(self) -> str:
        return self.text


# =============================================================================
# GUIDEBOOK SUMMARY
# =============================================================================

class GuidebookSummary(BaseModel):
    """
    Every field the parser can pull out of one guidebook.

    Absent values are None (or an empty list for list fields); downstream
    consumers substitute their own defaults.
    """

    model_config = ConfigDict(frozen=True)

    bpm: Optional[int] = Field(default=None, description="Tempo in BPM")
    key: Optional[str] = Field(
        default=None,
        description="Canonical scale name, or the best-effort raw key phrase",
        examples=["C Minor", "G# Major"],
    )
    time_signature: Optional[str] = Field(default=None, examples=["4/4", "6/8"])
    genre: Optional[str] = Field(default=None)
    vibe: Optional[str] = Field(default=None)
    chord_progression: Optional[str] = Field(default=None, examples=["vi-IV-I-V"])
    title: Optional[str] = Field(default=None)
    instruments: List[str] = Field(default_factory=list)
    arrangement: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict:
        return self.model_dump()

    def __str__(self) -> str:
        parts = []
        if self.title:
            parts.append(f"Title: {self.title}")
        if self.key:
            parts.append(f"Key: {self.key}")
        if self.bpm is not None:
            parts.append(f"Tempo: {self.bpm} BPM")
        if self.time_signature:
            parts.append(f"Time: {self.time_signature}")
        if self.chord_progression:
            parts.append(f"Progression: {self.chord_progression}")
        if self.genre:
            parts.append(f"Genre: {self.genre}")
        return " | ".join(parts) if parts else "(no fields extracted)"
