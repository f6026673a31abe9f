"""Analysis engine: descriptive statistics and a readability estimate.

``analyze`` is pure and total. Counts that would divide by zero fall
back to 0 instead of raising.
"""

from collections import Counter
import math
import re

from textconvert.core.models import AnalysisReport, CharacterCount, TextStats, WordCount
from textconvert.core.tokenize import round_half_up
from textconvert.core.types import TextComplexity
from textconvert.utils.constants import Constants

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might",
        "must", "can", "this", "that", "these", "those", "i", "you", "he", "she",
        "it", "we", "they", "me", "him", "her", "us", "them",
    }
)
"""Function words left out of the most-common-words ranking."""

READABILITY_LEVELS: list[tuple[int, str]] = [
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
]

_WHITESPACE = re.compile(r"\s")
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_VOWEL = re.compile(r"[aeiouAEIOU]")
# ASCII word characters only; whitespace stays Unicode-aware
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")


def _count_non_blank(segments: list[str]) -> int:
    return sum(1 for segment in segments if segment.strip())


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens (0 for blank text)."""
    return len(text.split())


def most_common_words(text: str) -> tuple[WordCount, ...]:
    """Top ranked words, excluding stop words and words of two letters or fewer.

    Ties keep the order in which words first appear.
    """
    tokens = _NON_WORD.sub("", text.lower()).split()
    counts = Counter(
        token
        for token in tokens
        if len(token) >= Constants.MIN_RANKED_WORD_LENGTH and token not in STOP_WORDS
    )
    return tuple(
        WordCount(word=word, count=count)
        for word, count in counts.most_common(Constants.TOP_RANKING_SIZE)
    )


def character_frequency(text: str) -> tuple[CharacterCount, ...]:
    """Top ranked ASCII letters, case-insensitive."""
    counts = Counter(char for char in text.lower() if "a" <= char <= "z")
    return tuple(
        CharacterCount(char=char, count=count)
        for char, count in counts.most_common(Constants.TOP_RANKING_SIZE)
    )


def classify_complexity(words_per_sentence: float, word_length: float) -> TextComplexity:
    if (
        words_per_sentence > Constants.COMPLEX_WORDS_PER_SENTENCE
        or word_length > Constants.COMPLEX_WORD_LENGTH
    ):
        return TextComplexity.COMPLEX
    if (
        words_per_sentence > Constants.MODERATE_WORDS_PER_SENTENCE
        or word_length > Constants.MODERATE_WORD_LENGTH
    ):
        return TextComplexity.MODERATE
    return TextComplexity.SIMPLE


def readability_score(words_per_sentence: float, syllables_per_word: float) -> int:
    """Flesch Reading Ease estimate clamped to 0-100."""
    score = (
        Constants.FLESCH_BASE
        - Constants.FLESCH_SENTENCE_WEIGHT * words_per_sentence
        - Constants.FLESCH_SYLLABLE_WEIGHT * syllables_per_word
    )
    return int(round_half_up(max(0.0, min(100.0, score))))


def readability_level(score: int) -> str:
    """Describe a readability score, e.g. 65 -> 'Standard'."""
    for threshold, level in READABILITY_LEVELS:
        if score >= threshold:
            return level
    return "Very Difficult"


def analyze(text: str) -> AnalysisReport:
    """Compute the full analysis report for text.

    Args:
        text: Input text

    Returns:
        AnalysisReport; the all-zero report for blank input
    """
    if not text.strip():
        return AnalysisReport()

    characters_no_spaces = len(_WHITESPACE.sub("", text))
    words = count_words(text)
    sentences = _count_non_blank(_SENTENCE_TERMINATORS.split(text))
    paragraphs = _count_non_blank(_PARAGRAPH_BREAK.split(text))

    words_per_sentence = round_half_up(words / sentences, 1) if sentences else 0.0
    # Vowel-split count is a crude stand-in for syllables
    syllables_per_word = len(_VOWEL.split(text)) / words
    word_length = characters_no_spaces / words

    return AnalysisReport(
        characters=len(text),
        characters_no_spaces=characters_no_spaces,
        words=words,
        sentences=sentences,
        paragraphs=paragraphs,
        average_words_per_sentence=words_per_sentence,
        reading_time_minutes=math.ceil(words / Constants.READING_WORDS_PER_MINUTE),
        readability_score=readability_score(words_per_sentence, syllables_per_word),
        text_complexity=classify_complexity(words_per_sentence, word_length),
        avg_word_length=round_half_up(word_length, 1),
        most_common_words=most_common_words(text),
        character_frequency=character_frequency(text),
    )


def quick_stats(text: str) -> TextStats:
    """Character, word and line counts for the input area."""
    return TextStats(characters=len(text), words=count_words(text), lines=text.count("\n") + 1)
