"""Shared constants for textconvert."""


class Constants:
    """Fixed values used across the conversion and analysis engines."""

    # Reading speed used for the reading time estimate (words per minute)
    READING_WORDS_PER_MINUTE = 200

    # Flesch Reading Ease constants
    FLESCH_BASE = 206.835
    FLESCH_SENTENCE_WEIGHT = 1.015
    FLESCH_SYLLABLE_WEIGHT = 84.6

    # Frequency rankings
    TOP_RANKING_SIZE = 5
    MIN_RANKED_WORD_LENGTH = 3

    # Text complexity thresholds
    COMPLEX_WORDS_PER_SENTENCE = 20
    COMPLEX_WORD_LENGTH = 6
    MODERATE_WORDS_PER_SENTENCE = 15
    MODERATE_WORD_LENGTH = 5

    # Conversion history
    HISTORY_CAPACITY = 10
    HISTORY_PREVIEW_LENGTH = 30

    # File ingestion and export
    SUPPORTED_SUFFIXES = (".txt", ".md", ".csv")
    CONVERTED_FILENAME = "converted-text.txt"
    COMBINED_FILENAME = "processed-files.txt"
    ANALYSIS_FILENAME = "text-analysis.txt"
    CONVERSIONS_FILENAME = "conversions.txt"
