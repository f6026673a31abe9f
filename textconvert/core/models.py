"""Value objects produced by the analysis engine."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from textconvert.core.types import TextComplexity

# Immutable, serialized with the camelCase keys display layers expect
_VALUE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class WordCount(BaseModel):
    """A ranked word and how often it appears."""

    model_config = _VALUE_CONFIG

    word: str
    count: int = Field(ge=1)


class CharacterCount(BaseModel):
    """A ranked letter and how often it appears."""

    model_config = _VALUE_CONFIG

    char: str
    count: int = Field(ge=1)


class TextStats(BaseModel):
    """Lightweight counters shown beneath the input area."""

    model_config = _VALUE_CONFIG

    characters: int = 0
    words: int = 0
    lines: int = 1


class AnalysisReport(BaseModel):
    """Descriptive statistics for one input string.

    The defaults form the report for empty or whitespace-only input.
    """

    model_config = _VALUE_CONFIG

    characters: int = 0
    characters_no_spaces: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    average_words_per_sentence: float = 0.0
    reading_time_minutes: int = 0
    readability_score: int = Field(0, ge=0, le=100)
    text_complexity: TextComplexity = TextComplexity.SIMPLE
    avg_word_length: float = 0.0
    most_common_words: tuple[WordCount, ...] = ()
    character_frequency: tuple[CharacterCount, ...] = ()
