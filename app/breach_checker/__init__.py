"""Breached passwords lookup.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import AbstractBreachChecker
from .exceptions import (
    BreachCheckError,
    BreachCheckResponseError,
    BreachCheckUnavailableError,
)
from .pwned_passwords import PwnedPasswordsChecker
from .stub import StubBreachChecker

__all__ = [
    "AbstractBreachChecker",
    "BreachCheckError",
    "BreachCheckResponseError",
    "BreachCheckUnavailableError",
    "PwnedPasswordsChecker",
    "StubBreachChecker",
]
