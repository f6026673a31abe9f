"""Conversion engine: named, total ``str -> str`` transforms.

Every transform is pure and defined for every string, including the
empty string. Word detection relies on ASCII-only regex ``\\w`` heuristics
rather than linguistic tokenization, so punctuation-adjacent words are each
treated individually.
"""

import re
from typing import Callable

from textconvert.core.tokenize import Span, transform_spans
from textconvert.core.types import ConversionFamily, ConversionId

ConversionFn = Callable[[str], str]

_WHITESPACE = re.compile(r"\s")
_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_START = re.compile(r"^\w|\.\s+\w", re.ASCII)
_TITLE_WORD = re.compile(r"\w\S*", re.ASCII)
_WORD_START = re.compile(r"\b\w", re.ASCII)
# First character, any capital letter, or the start of a word
_IDENTIFIER_BOUNDARY = re.compile(r"^\w|[A-Z]|\b\w", re.ASCII)
_COMMA_BETWEEN_DIGITS = re.compile(r"(?<=\d),(?=\d)", re.ASCII)
_PERIOD_BETWEEN_DIGITS = re.compile(r"(?<=\d)\.(?=\d)", re.ASCII)
_THOUSANDS_POSITION = re.compile(r"\B(?=(?:\d{3})+(?!\d))", re.ASCII)
_SEPARATORS = re.compile(r"[,\s]")


def _upper_span(span: Span) -> str:
    return span.text.upper()


def sentence_case(text: str) -> str:
    return transform_spans(_SENTENCE_START, text.lower(), _upper_span)


def lower_case(text: str) -> str:
    return text.lower()


def upper_case(text: str) -> str:
    return text.upper()


def title_case(text: str) -> str:
    return transform_spans(
        _TITLE_WORD, text, lambda span: span.text[:1].upper() + span.text[1:].lower()
    )


def camel_case(text: str) -> str:
    """Lowercase the leading character, uppercase every other word start, drop whitespace."""
    converted = transform_spans(
        _IDENTIFIER_BOUNDARY,
        text,
        lambda span: span.text.lower() if span.start == 0 else span.text.upper(),
    )
    return _WHITESPACE_RUN.sub("", converted)


def pascal_case(text: str) -> str:
    return _WHITESPACE_RUN.sub("", transform_spans(_IDENTIFIER_BOUNDARY, text, _upper_span))


def snake_case(text: str) -> str:
    return _WHITESPACE_RUN.sub("_", text.lower())


def kebab_case(text: str) -> str:
    return _WHITESPACE_RUN.sub("-", text.lower())


def alternating_case(text: str) -> str:
    """Lowercase characters at even positions, uppercase those at odd positions."""
    return "".join(
        char.lower() if index % 2 == 0 else char.upper() for index, char in enumerate(text)
    )


def inverse_case(text: str) -> str:
    """Uppercase characters at even positions, lowercase those at odd positions."""
    return "".join(
        char.upper() if index % 2 == 0 else char.lower() for index, char in enumerate(text)
    )


def reverse_text(text: str) -> str:
    """Reverse the code point sequence.

    Grapheme clusters made of several code points (combining marks, ZWJ
    emoji sequences) come out reordered.
    """
    return text[::-1]


def capitalized_case(text: str) -> str:
    return transform_spans(_WORD_START, text, _upper_span)


def comma_to_period(text: str) -> str:
    return _COMMA_BETWEEN_DIGITS.sub(".", text)


def period_to_comma(text: str) -> str:
    return _PERIOD_BETWEEN_DIGITS.sub(",", text)


def add_thousand_separators(text: str) -> str:
    """Group every digit run in threes from the right, e.g. 1234567 -> 1,234,567."""
    return _THOUSANDS_POSITION.sub(",", text)


def remove_separators(text: str) -> str:
    return _SEPARATORS.sub("", text)


def remove_spaces(text: str) -> str:
    return _WHITESPACE.sub("", text)


def remove_line_breaks(text: str) -> str:
    return text.replace("\n", "")


def remove_extra_spaces(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text)


def trim_whitespace(text: str) -> str:
    return text.strip()


# Declaration order is the display order within each family
CONVERSIONS: dict[ConversionId, tuple[ConversionFamily, ConversionFn]] = {
    ConversionId.SENTENCE_CASE: (ConversionFamily.TEXT_CASE, sentence_case),
    ConversionId.LOWER_CASE: (ConversionFamily.TEXT_CASE, lower_case),
    ConversionId.UPPER_CASE: (ConversionFamily.TEXT_CASE, upper_case),
    ConversionId.TITLE_CASE: (ConversionFamily.TEXT_CASE, title_case),
    ConversionId.CAMEL_CASE: (ConversionFamily.TEXT_CASE, camel_case),
    ConversionId.PASCAL_CASE: (ConversionFamily.TEXT_CASE, pascal_case),
    ConversionId.SNAKE_CASE: (ConversionFamily.TEXT_CASE, snake_case),
    ConversionId.KEBAB_CASE: (ConversionFamily.TEXT_CASE, kebab_case),
    ConversionId.ALTERNATING_CASE: (ConversionFamily.TEXT_CASE, alternating_case),
    ConversionId.INVERSE_CASE: (ConversionFamily.TEXT_CASE, inverse_case),
    ConversionId.REVERSE_TEXT: (ConversionFamily.TEXT_CASE, reverse_text),
    ConversionId.CAPITALIZED_CASE: (ConversionFamily.TEXT_CASE, capitalized_case),
    ConversionId.COMMA_TO_PERIOD: (ConversionFamily.NUMBERS, comma_to_period),
    ConversionId.PERIOD_TO_COMMA: (ConversionFamily.NUMBERS, period_to_comma),
    ConversionId.ADD_THOUSAND_SEPARATORS: (ConversionFamily.NUMBERS, add_thousand_separators),
    ConversionId.REMOVE_SEPARATORS: (ConversionFamily.NUMBERS, remove_separators),
    ConversionId.REMOVE_SPACES: (ConversionFamily.SPECIAL, remove_spaces),
    ConversionId.REMOVE_LINE_BREAKS: (ConversionFamily.SPECIAL, remove_line_breaks),
    ConversionId.REMOVE_EXTRA_SPACES: (ConversionFamily.SPECIAL, remove_extra_spaces),
    ConversionId.TRIM_WHITESPACE: (ConversionFamily.SPECIAL, trim_whitespace),
}


def convert(conversion_id: ConversionId | str, text: str) -> str:
    """Apply the named conversion to text.

    Args:
        conversion_id: ConversionId member or its identifier string (e.g. "camelCase")
        text: Input text

    Returns:
        Converted text

    Raises:
        ValueError: If conversion_id is a string that names no conversion
    """
    _, conversion_fn = CONVERSIONS[ConversionId(conversion_id)]
    return conversion_fn(text)


def conversion_family(conversion_id: ConversionId) -> ConversionFamily:
    return CONVERSIONS[conversion_id][0]


def conversions_in_family(family: ConversionFamily) -> list[ConversionId]:
    return [cid for cid, (cid_family, _) in CONVERSIONS.items() if cid_family is family]


def conversion_label(conversion_id: ConversionId) -> str:
    """Human-readable label, e.g. camelCase -> 'Camel Case'."""
    spaced = re.sub(r"([A-Z])", r" \1", conversion_id.value)
    return spaced[:1].upper() + spaced[1:]
