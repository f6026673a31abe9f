"""textconvert - Text case converter and analyzer.

Convert free-form text between casing and formatting styles and compute
descriptive statistics such as word counts, readability and frequency
rankings.
"""

from textconvert.core import (
    AnalysisReport,
    Config,
    ConversionFamily,
    ConversionId,
    TextComplexity,
    analyze,
    convert,
    load_config,
)
from textconvert.processing import run_pipeline
from textconvert.session import ConversionHistory, HistoryEntry, perform_conversion
from textconvert.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "AnalysisReport",
    "Config",
    "ConversionFamily",
    "ConversionHistory",
    "ConversionId",
    "HistoryEntry",
    "TextComplexity",
    "analyze",
    "convert",
    "load_config",
    "perform_conversion",
    "run_pipeline",
    "setup_logger",
]
