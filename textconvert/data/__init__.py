"""Input loading for textconvert."""

from .files import (
    TextDocument,
    UnsupportedFileTypeError,
    combine_documents,
    format_file_size,
    is_supported_file,
    load_text_file,
    load_text_files,
)

__all__ = [
    "TextDocument",
    "UnsupportedFileTypeError",
    "combine_documents",
    "format_file_size",
    "is_supported_file",
    "load_text_file",
    "load_text_files",
]
