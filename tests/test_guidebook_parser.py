"""
Tests for trackguide/rules/guidebook_parser.py

Run with: pytest tests/test_guidebook_parser.py -v
"""

import pytest

from trackguide.data.schema import DEFAULT_SCALES
from trackguide.errors import MissingVocabularyError
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


class TestExtractTempo:
    """Tempo cascade: labeled ranges, ranges, labeled values, bare values."""

    def test_labeled_range_is_rounded_mean(self):
        """Test a labeled range."""
        assert extract_tempo("Tempo: 120-130 BPM") == 125

    def test_labeled_single_value(self):
        """Test a labeled single value."""
        assert extract_tempo("Tempo: 120 BPM") == 120

    def test_mean_rounds_half_up(self):
        """Test rounding of odd-width ranges."""
        assert extract_tempo("Tempo: 120-131 BPM") == 126
        assert extract_tempo("121-124 BPM") == 123

    @pytest.mark.parametrize("text, expected", [
        ("Tempo: 120 to 128 BPM", 124),
        ("Tempo: 120–130 BPM", 125),
        ("BPM: 90-100", 95),
        ("A steady 84-88 bpm groove", 86),
        ("BPM: 128", 128),
        ("Around 95 bpm.", 95),
        ("- **Tempo:** 100-110 BPM", 105),
    ])
    def test_phrasings(self, text, expected):
        """Test each tempo phrasing."""
        assert extract_tempo(text) == expected

    def test_range_pattern_outranks_labeled_single_value(self):
        """Test cascade priority."""
        doc = "Tempo: 90 BPM\nAlternative feel: 100-110 BPM"
        assert extract_tempo(doc) == 105

    def test_no_plausibility_check(self):
        """Test that implausible values are returned."""
        assert extract_tempo("Tempo: 5 BPM") == 5

    @pytest.mark.parametrize("text", ["", "A slow ballad in C", "Tempo: moderate"])
    def test_absent(self, text):
        """Test text without a tempo."""
        assert extract_tempo(text) is None

    def test_own_output_is_absent(self):
        """Test that a bare number is not a tempo."""
        assert extract_tempo(str(extract_tempo("Tempo: 120-130 BPM"))) is None

    def test_guidebook(self, guidebook):
        """Test the sample guidebook."""
        assert extract_tempo(guidebook) == 105


class TestExtractKey:
    """Key cascade and resolution against a caller-supplied vocabulary."""

    def test_suggested_key_label(self):
        """Test the suggested key label."""
        doc = "Suggested Key(s) / Scale(s): C Minor"
        assert extract_key(doc, ["C Minor", "C Major"]) == "C Minor"

    def test_verbatim_when_vocabulary_empty(self):
        """Test the verbatim result with no vocabulary."""
        # Known imprecise path: the value is not validated against anything
        assert extract_key("Key: G# Major", []) == "G# Major"

    def test_verbatim_when_nothing_fits(self):
        """Test the verbatim result for an unknown mode."""
        # Known imprecise path: an unknown mode name is passed through as is
        doc = "Suggested Key(s) / Scale(s): Lydian dominant"
        assert extract_key(doc, DEFAULT_SCALES) == "Lydian dominant"

    def test_normalized_major(self):
        """Test normalization of a lowercase mode."""
        doc = "Suggested Key(s) / Scale(s): D major."
        assert extract_key(doc, DEFAULT_SCALES) == "D Major"

    def test_bold_label(self):
        """Test a bold list label."""
        doc = "- **Suggested Key(s) / Scale(s):** F# minor (dark)"
        assert extract_key(doc, DEFAULT_SCALES) == "F# Minor"

    def test_later_candidate_matches_exactly(self):
        """Test an exact match on a later candidate."""
        doc = "Suggested Key(s) / Scale(s): Z Dorian / F# Minor"
        assert extract_key(doc, DEFAULT_SCALES) == "F# Minor"

    def test_root_and_mode_scan(self):
        """Test the root and mode scan."""
        doc = "Suggested Key(s) / Scale(s): e minor"
        assert extract_key(doc, DEFAULT_SCALES) == "E Minor"

    def test_scan_distinguishes_sharp_roots(self):
        """Test that C# does not resolve to C."""
        doc = "Suggested Key(s) / Scale(s): C# minor-ish"
        assert extract_key(doc, ["C Minor", "C# Minor"]) == "C# Minor"

    def test_shorthand_minor(self):
        """Test shorthand minor such as 'Am'."""
        doc = "Suggested Key(s) / Scale(s): Am"
        assert extract_key(doc, DEFAULT_SCALES) == "A Minor"

    def test_scan_keeps_accidental_before_chord_suffix(self):
        """Test chord-symbol keys such as 'G#m7'."""
        doc = "Suggested Key(s) / Scale(s): G#m7"
        assert extract_key(doc, DEFAULT_SCALES) == "G# Minor"
        doc = "Suggested Key(s) / Scale(s): C#dim"
        assert extract_key(doc, ["C Major", "C# Major"]) == "C# Major"

    def test_scan_only_considers_first_candidate(self):
        """Test that later candidates are not scanned."""
        # The second candidate would resolve, but only the first is scanned
        doc = "Suggested Key(s) / Scale(s): Z Dorian or f# minor"
        assert extract_key(doc, ["F# Minor"]) == "Z Dorian"

    def test_generic_key_label(self):
        """Test a generic 'Key' label."""
        assert extract_key("Key Signature: bb minor", DEFAULT_SCALES) == "Bb Minor"

    def test_bare_key_phrase(self):
        """Test a key phrase in prose."""
        assert extract_key("This track sits in Bb minor.", DEFAULT_SCALES) == "Bb Minor"

    def test_label_outranks_bare_phrase(self):
        """Test cascade priority."""
        doc = "Verse drifts to G Major.\nSuggested Key(s) / Scale(s): E Minor"
        assert extract_key(doc, DEFAULT_SCALES) == "E Minor"

    def test_no_match_inside_words(self):
        """Test that words ending in a note letter are ignored."""
        assert extract_key("an awesome major hook", DEFAULT_SCALES) is None

    def test_absent(self):
        """Test text without a key."""
        assert extract_key("Tempo: 120 BPM", DEFAULT_SCALES) is None
        assert extract_key("", []) is None

    def test_missing_vocabulary_fails_loudly(self):
        """Test that a missing vocabulary raises."""
        with pytest.raises(MissingVocabularyError):
            extract_key("Key: C Major", None)

    def test_missing_vocabulary_is_value_error(self):
        """Test that the error is a ValueError."""
        with pytest.raises(ValueError):
            extract_key("", None)

    def test_guidebook(self, guidebook):
        """Test the sample guidebook."""
        assert extract_key(guidebook, DEFAULT_SCALES) == "A Minor"

    def test_own_output_is_recognized_again(self, guidebook):
        """Test that a resolved key resolves to itself."""
        key = extract_key(guidebook, DEFAULT_SCALES)
        assert extract_key(key, DEFAULT_SCALES) == key
        assert extract_key("C Minor", ["C Minor"]) == "C Minor"


class TestExtractChordProgression:
    """Progression cascade and token cleanup."""

    def test_truncates_trailing_prose(self):
        """Test truncation of trailing prose."""
        doc = "Chord Progression(s): vi-IV-I-V, nice and simple."
        assert extract_chord_progression(doc) == "vi-IV-I-V"

    def test_absent(self):
        """Test text without a progression."""
        assert extract_chord_progression("no progression info here") is None
        assert extract_chord_progression("") is None

    def test_parenthetical_label(self):
        """Test a label with a parenthetical."""
        doc = "- **Chord Progression(s) (verse):** i-VI-III-VII, then IV-V."
        assert extract_chord_progression(doc) == "i-VI-III-VII"

    def test_progression_label(self):
        """Test a 'Progression' label."""
        assert extract_chord_progression("Progression: I-V-vi-IV") == "I-V-vi-IV"

    def test_chords_label(self):
        """Test a 'Chords' label."""
        assert extract_chord_progression("Chords: ii-V-I in the bridge") == "ii-V-I"

    def test_bare_roman_numerals(self):
        """Test a bare roman-numeral run."""
        doc = "Try a I - V - vi - IV loop for the hook"
        assert extract_chord_progression(doc) == "I - V - vi - IV"

    def test_only_first_of_several(self):
        """Test that only the first progression is kept."""
        doc = "Chord Progression(s): I-V-vi-IV; vi-IV-I-V"
        assert extract_chord_progression(doc) == "I-V-vi-IV"

    def test_extended_tokens(self):
        """Test slash chords, sus and sevenths."""
        doc = "Chord Progression(s): I-V/vi-IVsus2-V7."
        assert extract_chord_progression(doc) == "I-V/vi-IVsus2-V7"

    def test_accidentals(self):
        """Test flat-degree tokens."""
        assert extract_chord_progression("Progressions: i-bVII-bVI-V") == "i-bVII-bVI-V"

    def test_tokenless_label_falls_through(self):
        """Test fall-through to the next pattern."""
        doc = "Chord Progression(s): ???\nThen loop I-IV-V"
        assert extract_chord_progression(doc) == "I-IV-V"

    def test_guidebook(self, guidebook):
        """Test the sample guidebook."""
        assert extract_chord_progression(guidebook) == "i-VI-III-VII"

    def test_own_output_is_recognized_again(self, guidebook):
        """Test that a progression extracts to itself."""
        progression = extract_chord_progression(guidebook)
        assert extract_chord_progression(progression) == progression
        assert extract_chord_progression("vi-IV-I-V") == "vi-IV-I-V"


class TestExtractSuggestedTitle:
    """'- **Suggested Title:**' list items."""

    def test_strips_italic(self):
        """Test italic removal."""
        assert extract_suggested_title("- **Suggested Title:** *Midnight Drive*") == "Midnight Drive"

    def test_strips_bold_and_is_case_insensitive(self):
        """Test bold removal and a lowercase label."""
        doc = "Intro text\n  - **suggested title:** Neon **Rain**"
        assert extract_suggested_title(doc) == "Neon Rain"

    def test_requires_list_item(self):
        """Test that the label must be a list item."""
        assert extract_suggested_title("The Suggested Title: Foo") is None

    def test_empty_value(self):
        """Test an empty title."""
        assert extract_suggested_title("- **Suggested Title:**   \nNext line") is None

    def test_own_output_is_absent(self, guidebook):
        """Test that a bare title is not a title line."""
        title = extract_suggested_title(guidebook)
        assert title == "Neon Rain"
        assert extract_suggested_title(title) is None


class TestSupplementaryExtractors:
    """Time signature, genre, vibe, instruments and arrangement."""

    def test_time_signature(self, guidebook):
        """Test each time signature phrasing."""
        assert extract_time_signature(guidebook) == "4/4"
        assert extract_time_signature("A lilting 6/8 time feel") == "6/8"
        assert extract_time_signature("Written in 3/4") == "3/4"
        assert extract_time_signature("no meter") is None

    def test_genre(self, guidebook):
        """Test genre and style labels."""
        assert extract_genre(guidebook) == "Synthwave"
        assert extract_genre("Style: Lo-fi hip hop;") == "Lo-fi hip hop"
        assert extract_genre("nothing") is None

    def test_vibe(self, guidebook):
        """Test vibe and mood labels."""
        assert extract_vibe(guidebook) == "Nostalgic, driving night-drive energy"
        assert extract_vibe("Mood: Dreamy.") == "Dreamy"

    def test_instruments(self, guidebook):
        """Test the instrument list."""
        assert extract_instruments(guidebook) == [
            "Analog bass", "Juno pads", "gated drums", "lead synth",
        ]
        assert extract_instruments("no list") == []

    def test_arrangement(self, guidebook):
        """Test the arrangement list."""
        assert extract_arrangement(guidebook) == ["Intro", "Verse", "Chorus", "Outro"]
        assert extract_arrangement("Form: A > B > A") == ["A", "B", "A"]
        assert extract_arrangement("") == []
