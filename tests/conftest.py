"""Shared fixtures: a guidebook in the shape the generator writes them."""

import pytest


SAMPLE_GUIDEBOOK = """# TrackGuide: Neon Rain

- **Suggested Title:** **Neon Rain**

## 1. Song Overview
- **Genre:** Synthwave.
- **Vibe:** Nostalgic, driving night-drive energy
- **Tempo:** 100-110 BPM
- **Time Signature:** 4/4

## 2. Instrumentation
- **Instruments:** Analog bass, Juno pads; gated drums, lead synth
- **Song Structure:** Intro - Verse - Chorus - Outro

### 2a. Sound Design Notes
Keep the pads wide.

## 3. Arrangement Tips
Build energy slowly.

## 4. Harmony, Melody & Rhythmic Core
- **Suggested Key(s) / Scale(s):** A Minor or C Major (relative keys)
- **Chord Progression(s) (verse):** i-VI-III-VII, then IV-V.
- Melody sits around the fifth.

## 5. Mixing
Sidechain the pads.
"""


@pytest.fixture
def guidebook() -> str:
    return SAMPLE_GUIDEBOOK
