"""Breach checker exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    BREACH_CHECK_UNAVAILABLE_ERROR = 1
    BREACH_CHECK_RESPONSE_ERROR = 2


class BreachCheckError(BaseDomainException):
    """Base exception class for breach checker errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class BreachCheckUnavailableError(BreachCheckError):
    """Breach lookup service cannot be reached or answered with an error."""

    code = ErrorCodes.BREACH_CHECK_UNAVAILABLE_ERROR


class BreachCheckResponseError(BreachCheckUnavailableError):
    """Breach lookup service answered with an unreadable body."""

    code = ErrorCodes.BREACH_CHECK_RESPONSE_ERROR
