"""Password check use cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Callable, TypeAlias

from loguru import logger

from breach_checker import AbstractBreachChecker, BreachCheckUnavailableError
from config import BreachCheckFailureMode, Settings

from .constants import RuleKey
from .dataclasses import ValidationReport, Violation
from .error_messages import ErrorMessages
from .validator import PasswordValidator

ReportSink: TypeAlias = Callable[[ValidationReport], None]


class PasswordCheckUseCase:
    """Validate a candidate password before it is accepted.

    Structural rules run first and always complete, then the breach lookup
    is awaited and merged into the same report.
    """

    _password_validator: PasswordValidator
    _breach_checker: AbstractBreachChecker
    _failure_mode: BreachCheckFailureMode

    def __init__(
        self,
        password_validator: PasswordValidator,
        breach_checker: AbstractBreachChecker,
        settings: Settings,
    ) -> None:
        """Initialize Password Check Use Case."""
        self._password_validator = password_validator
        self._breach_checker = breach_checker
        self._failure_mode = settings.BREACH_CHECK_FAILURE_MODE

    async def validate(
        self,
        password: str,
        on_report: ReportSink | None = None,
    ) -> tuple[ValidationReport, bool]:
        """Validate password against every rule and the breach corpus.

        The report is delivered once, fully assembled: passed to `on_report`
        when given and returned along with the verdict.

        :param str password: candidate password
        :param ReportSink | None on_report: report sink
        :raises BreachCheckUnavailableError: lookup failed in `raise` mode
        :return tuple[ValidationReport, bool]: report and True if invalid
        """
        report = self._password_validator.validate(password)

        if violation := await self._check_breach(password):
            report.add(violation)

        is_invalid = report.is_invalid
        if is_invalid:
            failed = ", ".join(report)
            logger.info(f"Password rejected, failed rules: {failed}")

        if on_report is not None:
            on_report(report)

        return report, is_invalid

    async def _check_breach(self, password: str) -> Violation | None:
        try:
            is_breached = await self._breach_checker.is_breached(password)
        except BreachCheckUnavailableError:
            if self._failure_mode == "raise":
                raise

            if self._failure_mode == "open":
                logger.warning("Breach lookup unavailable, check skipped")
                return None

            logger.warning("Breach lookup unavailable, password rejected")
            return Violation(
                key=RuleKey.BREACH_CHECK_UNAVAILABLE,
                message=ErrorMessages.BREACH_CHECK_UNAVAILABLE,
            )

        if is_breached:
            return Violation(
                key=RuleKey.IS_BREACHED_PASSWORD,
                message=ErrorMessages.IS_BREACHED_PASSWORD,
            )
        return None
