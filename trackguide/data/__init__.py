"""
Data Subpackage

This package holds the value types produced by the parser:
    - schema.py: Pydantic models (Section, GuidebookSummary) and the
                 generator's default scale vocabulary

All models are frozen and built fresh per call.
"""

from trackguide.data.schema import Section, GuidebookSummary, DEFAULT_SCALES
