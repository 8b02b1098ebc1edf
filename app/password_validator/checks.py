"""Password structural checks.

Every check is a pure function of the password: True means the rule holds.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from .constants import (
    REGEXP_DIGITS,
    REGEXP_LOWERCASE_LETTERS,
    REGEXP_REPEATABLE_SYMBOLS,
    REGEXP_UPPERCASE_LETTERS,
    SPECIAL_SCRIPT_RANGES,
    SPECIAL_SYMBOLS,
)


def _build_special_symbols_regexp(
    symbols: str,
    ranges: list[tuple[int, int]],
) -> re.Pattern[str]:
    """Compile one character class from a symbol set and code point ranges."""
    class_body = re.escape(symbols) + "".join(
        f"{re.escape(chr(first))}-{re.escape(chr(last))}"
        for first, last in ranges
    )
    return re.compile(f"[{class_body}]")


_UPPERCASE_LETTERS = re.compile(REGEXP_UPPERCASE_LETTERS)
_LOWERCASE_LETTERS = re.compile(REGEXP_LOWERCASE_LETTERS)
_DIGITS = re.compile(REGEXP_DIGITS)
_SPECIAL_SYMBOLS = _build_special_symbols_regexp(
    SPECIAL_SYMBOLS,
    SPECIAL_SCRIPT_RANGES,
)


def min_length(password: str, length: int) -> bool:
    """Validate minimum password length in code points."""
    return len(password) >= length


def max_length(password: str, length: int) -> bool:
    """Validate maximum password length in code points."""
    return len(password) <= length


def has_uppercase_letter(password: str) -> bool:
    """Validate password has an ASCII uppercase letter."""
    return _UPPERCASE_LETTERS.search(password) is not None


def has_lowercase_letter(password: str) -> bool:
    """Validate password has an ASCII lowercase letter."""
    return _LOWERCASE_LETTERS.search(password) is not None


def has_digit(password: str) -> bool:
    """Validate password has an ASCII digit."""
    return _DIGITS.search(password) is not None


def has_special_symbol(password: str) -> bool:
    """Validate password has a special symbol.

    A special symbol is one of the punctuation set, a letter of an accepted
    non-Latin script (Hiragana, Katakana, Han, Arabic/Farsi, Cyrillic) or an
    emoji.
    """
    return _SPECIAL_SYMBOLS.search(password) is not None


def max_repeating_symbols_in_row(password: str, count: int) -> bool:
    """Validate that no alphanumeric symbol repeats `count` times in a row."""
    pattern = rf"({REGEXP_REPEATABLE_SYMBOLS})\1{{{count - 1}}}"
    return re.search(pattern, password) is None
