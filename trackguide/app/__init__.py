"""
App Subpackage

This package contains the user-facing application:
    - cli.py: `trackguide-parse` command that summarizes a guidebook file

Usage:
    python -m trackguide.app.cli guidebook.md --json
"""
