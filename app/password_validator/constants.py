"""Password policy constants file.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum
from typing import Literal


class RuleKey(StrEnum):
    """Stable identifiers of the password rules, used as report keys."""

    TOO_SHORT = "tooShort"
    TOO_LONG = "tooLong"
    UPPER_CASE = "upperCase"
    LOWER_CASE = "lowerCase"
    NUMBER = "number"
    SPECIAL_CHAR = "specialChar"
    REPEATED_CHAR = "repeatedChar"
    IS_BREACHED_PASSWORD = "isBreachedPassword"
    BREACH_CHECK_UNAVAILABLE = "breachCheckUnavailable"


MIN_PASSWORD_LENGTH: Literal[14] = 14
MAX_PASSWORD_LENGTH: Literal[100] = 100
MAX_REPEATING_SYMBOLS_IN_ROW: Literal[4] = 4

SPECIAL_SYMBOLS: str = '!@#$%^&*(),.?":{}|<>'

# (first, last) code points, inclusive
__HIRAGANA_RANGES: list[tuple[int, int]] = [(0x3040, 0x309F)]
__KATAKANA_RANGES: list[tuple[int, int]] = [
    (0x30A0, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF9F),
    (0x1AFF0, 0x1B16F),
]
__HAN_RANGES: list[tuple[int, int]] = [
    (0x2E80, 0x2FDF),
    (0x3005, 0x3007),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2EBEF),
    (0x2EBF0, 0x2EE5F),
    (0x2F800, 0x2FA1F),
    (0x30000, 0x3134F),
    (0x31350, 0x323AF),
]
# Farsi letters live in the Arabic blocks
__ARABIC_RANGES: list[tuple[int, int]] = [
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x0870, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFC),
]
__CYRILLIC_RANGES: list[tuple[int, int]] = [
    (0x0400, 0x04FF),
    (0x0500, 0x052F),
    (0x1C80, 0x1C8F),
    (0x2DE0, 0x2DFF),
    (0xA640, 0xA69F),
    (0x1E030, 0x1E08F),
]
# Pictographic emoji only, ASCII keycap bases (digits, '#', '*') excluded
__EMOJI_RANGES: list[tuple[int, int]] = [
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x21AA),
    (0x231A, 0x23FF),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25FE),
    (0x2600, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3299),
    (0x1F000, 0x1FAFF),
]

SPECIAL_SCRIPT_RANGES: list[tuple[int, int]] = [
    *__HIRAGANA_RANGES,
    *__KATAKANA_RANGES,
    *__HAN_RANGES,
    *__ARABIC_RANGES,
    *__CYRILLIC_RANGES,
    *__EMOJI_RANGES,
]

REGEXP_UPPERCASE_LETTERS: str = r"[A-Z]"
REGEXP_LOWERCASE_LETTERS: str = r"[a-z]"
REGEXP_DIGITS: str = r"[0-9]"
REGEXP_REPEATABLE_SYMBOLS: str = r"[A-Za-z0-9]"
