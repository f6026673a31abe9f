"""Helper functions for report generation."""

import json
import sys
from typing import Any, TextIO

from loguru import logger
import yaml


def format_report_header(title: str, width: int = 60) -> str:
    """Format a standard report header block."""
    rule = "=" * width
    return f"{rule}\n{title}\n{rule}\n"


def format_bar(value: int, maximum: int, width: int = 20) -> str:
    """Proportional bar, e.g. for frequency counts."""
    if maximum <= 0:
        return ""
    return "█" * max(1, round(width * value / maximum)) if value > 0 else ""


def write_structured(payload: Any, stream: TextIO, output_format: str) -> None:
    """Write a JSON- or YAML-compatible payload to a stream.

    Args:
        payload: Dict or list of plain values
        stream: Output stream (file handle or sys.stdout)
        output_format: "json" or "yaml"

    Raises:
        yaml.YAMLError: If YAML serialization fails
        OSError: If writing to stdout fails
    """
    try:
        if output_format == "yaml":
            yaml.safe_dump(
                payload,
                stream,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
            )
        else:
            json.dump(payload, stream, ensure_ascii=False, indent=2)
            stream.write("\n")
    except yaml.YAMLError as e:
        logger.error(f"✗ YAML serialization error: {e}")
        raise
    except OSError as e:
        if stream is sys.stdout:
            logger.error(f"✗ Error writing to stdout: {e}")
        raise
