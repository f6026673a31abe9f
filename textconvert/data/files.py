"""Text file ingestion and combined export."""

from dataclasses import dataclass
import mimetypes
from pathlib import Path

from loguru import logger

from textconvert.utils import Constants, expand_file_path


class UnsupportedFileTypeError(ValueError):
    """Raised when no usable text file was supplied."""


@dataclass(frozen=True)
class TextDocument:
    """Raw text loaded from a file, stdin or the command line."""

    name: str
    content: str
    size: int = 0


def is_supported_file(path: str | Path) -> bool:
    """Check whether a path looks like a plain text, Markdown or CSV file."""
    path = Path(path)
    if path.suffix.lower() in Constants.SUPPORTED_SUFFIXES:
        return True
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type == "text/plain"


def load_text_file(filepath: str | Path) -> TextDocument:
    """Read one UTF-8 text file.

    Raises:
        UnsupportedFileTypeError: If the file is not a supported text type
        FileNotFoundError, PermissionError, UnicodeDecodeError: On read failures
    """
    path = Path(expand_file_path(str(filepath)) or filepath)
    if not is_supported_file(path):
        raise UnsupportedFileTypeError(
            f"Unsupported file type: {path.name} (expected .txt, .md or .csv)"
        )

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error(f"✗ Input file not found: {path}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading input file: {path}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading input file {path}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    size = path.stat().st_size
    logger.debug(f"Loaded {path.name} ({format_file_size(size)})")
    return TextDocument(name=path.name, content=content, size=size)


def load_text_files(filepaths: list[str], verbose: bool = False) -> list[TextDocument]:
    """Load every supported file, skipping the rest.

    Raises:
        UnsupportedFileTypeError: If none of the paths is a supported text file
    """
    supported = []
    for filepath in filepaths:
        if is_supported_file(filepath):
            supported.append(filepath)
        else:
            logger.warning(f"⚠️  Skipping unsupported file: {filepath}")

    if not supported:
        raise UnsupportedFileTypeError("Please supply text files (.txt, .md, .csv)")

    documents = [load_text_file(filepath) for filepath in supported]
    if verbose:
        total = sum(doc.size for doc in documents)
        logger.info(f"  Loaded {len(documents)} file(s), {format_file_size(total)}")
    return documents


def combine_documents(documents: list[TextDocument]) -> str:
    """Concatenate documents, each under a ``=== name ===`` header."""
    return "".join(f"=== {doc.name} ===\n{doc.content}\n\n" for doc in documents)


def format_file_size(size: int) -> str:
    """Format a byte count, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB"]
    exponent = 0
    while exponent < len(units) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    scaled = f"{size / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {units[exponent]}"
