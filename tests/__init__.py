"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_sections.py          - Tests for trackguide/rules/sections.py
    tests/test_guidebook_parser.py  - Tests for trackguide/rules/guidebook_parser.py
    tests/test_key_normalizer.py    - Tests for trackguide/rules/key_normalizer.py
"""
