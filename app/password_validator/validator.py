"""Password Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Any, Callable, Self

from . import checks
from .constants import (
    MAX_PASSWORD_LENGTH,
    MAX_REPEATING_SYMBOLS_IN_ROW,
    MIN_PASSWORD_LENGTH,
    RuleKey,
)
from .dataclasses import ValidationReport, Violation
from .error_messages import ErrorMessages

CheckType = Callable[..., bool]


@dataclass(frozen=True)
class _Checker:
    """Checker dataclass."""

    check: CheckType
    args: tuple[Any, ...]
    violation: Violation


class PasswordValidator:
    """Builder of structural password rules.

    Rules are independent and all of them are evaluated, a failed rule never
    stops the others.

    Example:
        >>> validator = PasswordValidator().min_length(6).min_digits()
        >>> validator.validate("t3stPa$$w0rD132").is_invalid
        False
        >>> sorted(validator.validate("test"))
        [<RuleKey.NUMBER: 'number'>, <RuleKey.TOO_SHORT: 'tooShort'>]

    """

    _checkers: list[_Checker]

    def __init__(self) -> None:
        """Create new instance of the PasswordValidator class."""
        self._checkers = []

    @classmethod
    def default(cls) -> Self:
        """Build the fixed composite password policy."""
        return (
            cls()
            .min_length(MIN_PASSWORD_LENGTH)
            .max_length(MAX_PASSWORD_LENGTH)
            .min_uppercase_letters()
            .min_lowercase_letters()
            .min_digits()
            .min_special_symbols()
            .max_repeating_symbols_in_row(MAX_REPEATING_SYMBOLS_IN_ROW)
        )  # fmt: skip

    @property
    def rule_keys(self) -> list[RuleKey]:
        """Keys of registered rules in evaluation order."""
        return [checker.violation.key for checker in self._checkers]

    def __add_checker(
        self,
        check: CheckType,
        key: RuleKey,
        error_message: str,
        args: tuple[Any, ...] = (),
    ) -> None:
        if key in self.rule_keys:
            raise ValueError(f"Rule `{key}` is already registered")

        self._checkers.append(
            _Checker(
                check=check,
                args=args,
                violation=Violation(key=key, message=error_message),
            ),
        )

    def validate(self, password: str) -> ValidationReport:
        """Validate `password` against the rules.

        Example:
            >>> PasswordValidator().min_digits().validate("abc").as_dict()
            {'number': 'at least 1 number (0-9)'}
            >>> PasswordValidator().min_digits().validate("abc1").as_dict()
            {}

        Args:
            password (str): Password to validate against the rules.

        Returns:
            ValidationReport: new report with a violation per failed rule.

        """
        report = ValidationReport()
        for checker in self._checkers:
            if not checker.check(password, *checker.args):
                report.add(checker.violation)

        return report

    def min_length(self, length: int) -> Self:
        """Require minimum count of characters.

        Args:
            length (int): Minimum length allowed.

        Returns:
            PasswordValidator: Updated validator object.

        """
        self.__add_checker(
            check=checks.min_length,
            key=RuleKey.TOO_SHORT,
            error_message=ErrorMessages.TOO_SHORT.format(length),
            args=(length,),
        )
        return self

    def max_length(self, length: int) -> Self:
        """Require maximum count of characters.

        Args:
            length (int): Maximum length allowed.

        Returns:
            PasswordValidator: Updated validator object.

        """
        self.__add_checker(
            check=checks.max_length,
            key=RuleKey.TOO_LONG,
            error_message=ErrorMessages.TOO_LONG.format(length),
            args=(length,),
        )
        return self

    def min_uppercase_letters(self) -> Self:
        """Require an uppercase letter (A-Z)."""
        self.__add_checker(
            check=checks.has_uppercase_letter,
            key=RuleKey.UPPER_CASE,
            error_message=ErrorMessages.UPPER_CASE,
        )
        return self

    def min_lowercase_letters(self) -> Self:
        """Require a lowercase letter (a-z)."""
        self.__add_checker(
            check=checks.has_lowercase_letter,
            key=RuleKey.LOWER_CASE,
            error_message=ErrorMessages.LOWER_CASE,
        )
        return self

    def min_digits(self) -> Self:
        """Require a digit (0-9)."""
        self.__add_checker(
            check=checks.has_digit,
            key=RuleKey.NUMBER,
            error_message=ErrorMessages.NUMBER,
        )
        return self

    def min_special_symbols(self) -> Self:
        """Require a special symbol.

        Symbols from the punctuation set, letters of the accepted non-Latin
        scripts and emoji are all special.

        Example:
            >>> PasswordValidator().min_special_symbols().validate("ab!").is_invalid
            False
            >>> PasswordValidator().min_special_symbols().validate("пароль").is_invalid
            False
            >>> PasswordValidator().min_special_symbols().validate("ab_").is_invalid
            True

        Returns:
            PasswordValidator: Updated validator object.

        """  # noqa: E501
        self.__add_checker(
            check=checks.has_special_symbol,
            key=RuleKey.SPECIAL_CHAR,
            error_message=ErrorMessages.SPECIAL_CHAR,
        )
        return self

    def max_repeating_symbols_in_row(self, count: int) -> Self:
        """Forbid `count` identical alphanumeric symbols in a row.

        Example:
            >>> PasswordValidator().max_repeating_symbols_in_row(4).validate("aaa").is_invalid
            False
            >>> PasswordValidator().max_repeating_symbols_in_row(4).validate("aaaa").is_invalid
            True

        Args:
            count (int): Run length that is forbidden.

        Returns:
            PasswordValidator: Updated validator object.

        """  # noqa: E501
        self.__add_checker(
            check=checks.max_repeating_symbols_in_row,
            key=RuleKey.REPEATED_CHAR,
            error_message=ErrorMessages.REPEATED_CHAR.format(count - 1),
            args=(count,),
        )
        return self
