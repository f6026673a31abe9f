"""Report rendering for textconvert."""

from .analysis import format_analysis_report, report_to_dict
from .helpers import format_report_header, write_structured
from .history import format_conversion_list, format_history

__all__ = [
    "format_analysis_report",
    "format_conversion_list",
    "format_history",
    "format_report_header",
    "report_to_dict",
    "write_structured",
]
