"""Error Messages for password validator checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import SPECIAL_SYMBOLS


class ErrorMessages:
    """Error messages for password validation checks."""

    TOO_SHORT = "at least {} characters"
    TOO_LONG = "at most {} characters"

    UPPER_CASE = "at least 1 uppercase character (A-Z)"
    LOWER_CASE = "at least 1 lowercase character (a-z)"
    NUMBER = "at least 1 number (0-9)"

    SPECIAL_CHAR = f"at least 1 special character ({SPECIAL_SYMBOLS}), Japanese, Chinese, Arabic, Farsi, Cyrillic, or an emoji"  # fmt: skip # noqa: E501
    REPEATED_CHAR = "No {} repeat, consecutive characters"

    IS_BREACHED_PASSWORD = "The provided password is in a list of passwords commonly used on other websites. Please try again with a stronger password."  # fmt: skip # noqa: E501
    BREACH_CHECK_UNAVAILABLE = "Unable to check the password against the list of breached passwords. Please try again later."  # fmt: skip # noqa: E501
