"""
Command Line Interface for the TrackGuide Parser
=================================================

Summarizes a generated guidebook from the terminal.

Usage Examples:
    # Summarize a guidebook file
    python -m trackguide.app.cli guidebook.md

    # Read from stdin, emit JSON for scripting
    cat guidebook.md | python -m trackguide.app.cli --json

    # Print the condensed MIDI prompt context
    python -m trackguide.app.cli guidebook.md --context

    # Print one section
    python -m trackguide.app.cli guidebook.md --section "##\\s*3\\."

    # Resolve keys against your own vocabulary (YAML list of scale names)
    python -m trackguide.app.cli guidebook.md --scales scales.yaml
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from trackguide.data.schema import DEFAULT_SCALES, GuidebookSummary
from trackguide.errors import ScaleFileError, TrackGuideError
from trackguide.logging_setup import setup_logging
from trackguide.rules import (
    create_guidebook_summary,
    is_valid_guidebook,
    locate_section,
    summarize_essential_context,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PART 1: ARGUMENT PARSER SETUP
# =============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser object
    """
    parser = argparse.ArgumentParser(
        prog="trackguide-parse",
        description="""
Extract tempo, key, chord progression and other parameters from a
generated TrackGuide guidebook.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Guidebook Markdown file ('-' or omitted reads stdin)",
    )

    # ─────────────────────────────────────────────────────────────────────────
    # What to print
    # ─────────────────────────────────────────────────────────────────────────
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--context",
        action="store_true",
        help="Print the overview + harmony context instead of a summary",
    )
    mode.add_argument(
        "--section",
        metavar="REGEX",
        help="Print the section whose heading matches REGEX",
    )
    mode.add_argument(
        "--validate",
        action="store_true",
        help="Only check that the input looks like a guidebook (exit 1 if not)",
    )

    # ─────────────────────────────────────────────────────────────────────────
    # Output format options
    # ─────────────────────────────────────────────────────────────────────────
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Output the summary as JSON")
    output.add_argument("--yaml", action="store_true", help="Output the summary as YAML")

    parser.add_argument(
        "--scales",
        metavar="FILE",
        help="YAML list of scale names used to resolve the key (default: built-in list)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log which patterns matched",
    )

    return parser


# =============================================================================
# PART 2: INPUT
# =============================================================================

def read_document(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def load_scales(path: Optional[str]) -> List[str]:
    """Load a scale vocabulary from a YAML list, or return the default list."""
    if not path:
        return list(DEFAULT_SCALES)

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ScaleFileError(path, str(e)) from e

    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        raise ScaleFileError(path, "expected a list of scale names")
    return data


# =============================================================================
# PART 3: OUTPUT FORMATTING
# =============================================================================

def format_summary_pretty(summary: GuidebookSummary) -> str:
    """Format a summary as aligned 'Field: value' lines."""
    rows = [
        ("Title", summary.title),
        ("Tempo", f"{summary.bpm} BPM" if summary.bpm is not None else None),
        ("Key", summary.key),
        ("Time Signature", summary.time_signature),
        ("Chord Progression", summary.chord_progression),
        ("Genre", summary.genre),
        ("Vibe", summary.vibe),
        ("Instruments", ", ".join(summary.instruments) or None),
        ("Arrangement", " → ".join(summary.arrangement) or None),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)} : {value if value is not None else '-'}" for label, value in rows)


def format_summary_json(summary: GuidebookSummary) -> str:
    return json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)


def format_summary_yaml(summary: GuidebookSummary) -> str:
    return yaml.safe_dump(summary.to_dict(), sort_keys=False, allow_unicode=True).rstrip()


# =============================================================================
# PART 4: MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Process exit code
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        document = read_document(args.path)
        scales = load_scales(args.scales)
    except OSError as e:
        logger.error("Cannot read guidebook '%s': %s", args.path, e)
        return 1
    except TrackGuideError as e:
        logger.error("%s", e)
        return 1

    if args.validate:
        valid = is_valid_guidebook(document)
        print("valid" if valid else "invalid")
        return 0 if valid else 1

    if args.context:
        print(summarize_essential_context(document))
        return 0

    if args.section:
        try:
            section = locate_section(document, args.section)
        except re.error as e:
            logger.error("Invalid section pattern %r: %s", args.section, e)
            return 1
        if not section:
            logger.warning("No section matches %r", args.section)
            return 1
        print(section.text)
        return 0

    summary = create_guidebook_summary(document, scales)
    if args.json:
        print(format_summary_json(summary))
    elif args.yaml:
        print(format_summary_yaml(summary))
    else:
        print(format_summary_pretty(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
