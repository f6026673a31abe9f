"""Core conversion and analysis engines for textconvert."""

from .analysis import analyze, quick_stats, readability_level
from .config import Config, load_config
from .conversions import (
    CONVERSIONS,
    conversion_family,
    conversion_label,
    conversions_in_family,
    convert,
)
from .models import AnalysisReport, CharacterCount, TextStats, WordCount
from .types import ConversionFamily, ConversionId, TextComplexity

__all__ = [
    "CONVERSIONS",
    "AnalysisReport",
    "CharacterCount",
    "Config",
    "ConversionFamily",
    "ConversionId",
    "TextComplexity",
    "TextStats",
    "WordCount",
    "analyze",
    "conversion_family",
    "conversion_label",
    "conversions_in_family",
    "convert",
    "load_config",
    "quick_stats",
    "readability_level",
]
