"""Span tokenizer and numeric helpers shared by both engines."""

import math
from re import Pattern
from typing import Callable, NamedTuple


class Span(NamedTuple):
    """A slice of the input that either matched a word pattern or sits between matches."""

    text: str
    start: int
    is_word: bool


def split_spans(pattern: Pattern, text: str) -> list[Span]:
    """Split text into alternating gap and match spans.

    Joining the ``text`` of every span gives back the input unchanged.

    Args:
        pattern: Compiled pattern whose matches become word spans
        text: Input text

    Returns:
        Spans in input order
    """
    spans = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            spans.append(Span(text[pos : match.start()], pos, False))
        if match.end() > match.start():
            spans.append(Span(match.group(), match.start(), True))
        pos = match.end()
    if pos < len(text):
        spans.append(Span(text[pos:], pos, False))
    return spans


def transform_spans(pattern: Pattern, text: str, transform: Callable[[Span], str]) -> str:
    """Rewrite every word span with ``transform`` and reassemble the text."""
    return "".join(
        transform(span) if span.is_word else span.text for span in split_spans(pattern, text)
    )


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going towards positive infinity.

    Python's built-in ``round`` rounds ties to even, which would shift
    scores like 72.5 down to 72.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
