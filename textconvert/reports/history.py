"""Rendering of the conversion history and conversion listing."""

from textconvert.core.conversions import conversion_label, conversions_in_family
from textconvert.core.types import ConversionFamily
from textconvert.reports.helpers import format_report_header
from textconvert.session.history import ConversionHistory
from textconvert.session.shortcuts import shortcut_for

FAMILY_TITLES = {
    ConversionFamily.TEXT_CASE: "Text Case",
    ConversionFamily.NUMBERS: "Numbers",
    ConversionFamily.SPECIAL: "Special",
}


def format_history(history: ConversionHistory) -> str:
    """Recent conversions, newest first."""
    lines = [format_report_header("Recent Conversions")]
    if not len(history):
        lines.append("No conversions yet")
    for entry in history:
        lines.append(
            f"{entry.timestamp.strftime('%H:%M:%S')}  "
            f"{entry.conversion_id.value:<22} {entry.preview()}"
        )
    return "\n".join(lines) + "\n"


def format_conversion_list() -> str:
    """Every conversion grouped by family, with its shortcut if bound."""
    lines = []
    for family, title in FAMILY_TITLES.items():
        lines.append(f"{title}:")
        for conversion_id in conversions_in_family(family):
            shortcut = shortcut_for(conversion_id)
            suffix = f"  [{shortcut}]" if shortcut else ""
            lines.append(
                f"  {conversion_id.value:<24} {conversion_label(conversion_id)}{suffix}"
            )
        lines.append("")
    return "\n".join(lines)
