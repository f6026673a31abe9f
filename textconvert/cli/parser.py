"""Command-line interface for textconvert."""

import argparse

from textconvert.core.types import ConversionId
from textconvert.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="textconvert",
        description="Convert text between casing/formatting styles and analyze it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a literal string
  %(prog)s --to camelCase --text "hello world test"

  # Convert files; several inputs are written as one combined document
  %(prog)s --to snakeCase notes.txt todo.md -o out/

  # Analyze stdin and print a JSON report
  cat essay.txt | %(prog)s --analyze --format json

  # List every conversion with its keyboard shortcut
  %(prog)s --list

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "conversion": "titleCase",
  "analyze": true,
  "inputs": ["chapter1.txt", "chapter2.txt"],
  "output": "converted",
  "output_format": "yaml",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input
    parser.add_argument(
        "inputs",
        nargs="*",
        default=[],
        help="Text files to process (.txt, .md, .csv); reads stdin when omitted",
    )
    parser.add_argument("--text", type=str, help="Literal text to process instead of files")

    # Actions
    parser.add_argument(
        "-t",
        "--to",
        dest="conversion",
        type=str,
        choices=[cid.value for cid in ConversionId],
        metavar="CONVERSION",
        help="Conversion to apply (see --list)",
    )
    parser.add_argument(
        "-a", "--analyze", action="store_true", help="Print text statistics and readability"
    )
    parser.add_argument(
        "--list",
        dest="list_conversions",
        action="store_true",
        help="List available conversions and exit",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file, or directory to receive a default-named file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        choices=["text", "json", "yaml"],
        default="text",
        help="Analysis report format",
    )

    # History
    parser.add_argument(
        "--history",
        dest="show_history",
        action="store_true",
        help="Print recent conversions to stderr when done",
    )
    parser.add_argument(
        "--history-size",
        type=int,
        default=Constants.HISTORY_CAPACITY,
        help=f"Number of conversions kept in history (default: {Constants.HISTORY_CAPACITY})",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser
