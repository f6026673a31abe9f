"""Utility functions for textconvert."""

from textconvert.utils.constants import Constants
from textconvert.utils.helpers import (
    ensure_directory_exists,
    expand_file_path,
    write_file_safely,
)
from textconvert.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "setup_logger",
    "write_file_safely",
]
