"""Type definitions for textconvert."""

from enum import Enum


class ConversionFamily(Enum):
    """Group a conversion is listed under."""

    TEXT_CASE = "text"
    NUMBERS = "numbers"
    SPECIAL = "special"


class ConversionId(Enum):
    """Identifier selecting one text transform."""

    # Letter case
    SENTENCE_CASE = "sentenceCase"
    LOWER_CASE = "lowerCase"
    UPPER_CASE = "upperCase"
    TITLE_CASE = "titleCase"
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "pascalCase"
    SNAKE_CASE = "snakeCase"
    KEBAB_CASE = "kebabCase"
    ALTERNATING_CASE = "alternatingCase"
    INVERSE_CASE = "inverseCase"
    REVERSE_TEXT = "reverseText"
    CAPITALIZED_CASE = "capitalizedCase"

    # Number formatting
    COMMA_TO_PERIOD = "commaToPeriod"
    PERIOD_TO_COMMA = "periodToComma"
    ADD_THOUSAND_SEPARATORS = "addThousandSeparators"
    REMOVE_SEPARATORS = "removeSeparators"

    # Whitespace and special
    REMOVE_SPACES = "removeSpaces"
    REMOVE_LINE_BREAKS = "removeLineBreaks"
    REMOVE_EXTRA_SPACES = "removeExtraSpaces"
    TRIM_WHITESPACE = "trimWhitespace"


class TextComplexity(Enum):
    """Coarse complexity rating derived from sentence and word length."""

    SIMPLE = "Simple"
    MODERATE = "Moderate"
    COMPLEX = "Complex"
