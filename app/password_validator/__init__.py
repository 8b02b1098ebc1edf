"""Password validation module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import RuleKey
from .dataclasses import ValidationReport, Violation
from .error_messages import ErrorMessages
from .use_cases import PasswordCheckUseCase
from .validator import PasswordValidator

__all__ = [
    "ErrorMessages",
    "PasswordCheckUseCase",
    "PasswordValidator",
    "RuleKey",
    "ValidationReport",
    "Violation",
]
