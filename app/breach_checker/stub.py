"""Stub breach checker for a disabled lookup.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import AbstractBreachChecker
from .utils import logger_wraps


class StubBreachChecker(AbstractBreachChecker):
    """Stub checker, every password is reported as not breached."""

    @logger_wraps(is_stub=True)
    async def is_breached(self, password: str) -> bool:  # noqa: ARG002
        return False
