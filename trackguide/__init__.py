"""
TrackGuide Parser - Source Package

Extracts structured musical parameters (tempo, key, chord progression,
title, sections) from the Markdown guidebooks written by a text generator.

Subpackages:
    - trackguide.data: Value types and the default scale vocabulary
    - trackguide.rules: Section locator, field extractors, key normalizer
    - trackguide.app: Command-line interface

Example usage:
    from trackguide.rules import create_guidebook_summary
    from trackguide.data import DEFAULT_SCALES

    summary = create_guidebook_summary(guidebook_text, DEFAULT_SCALES)
    print(summary.bpm)                # 125
    print(summary.chord_progression)  # 'vi-IV-I-V'
"""

__version__ = "0.1.0"
__author__ = "TrackGuide Team"
