"""Abstract breach checker.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import ABC, abstractmethod

from loguru import logger as loguru_logger

log = loguru_logger.bind(name="breach_checker")

log.add(
    "logs/breach_checker_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "breach_checker",
    retention="10 days",
    rotation="1d",
    colorize=False,
)


class AbstractBreachChecker(ABC):
    """Lookup of a password in a corpus of breached passwords."""

    @abstractmethod
    async def is_breached(self, password: str) -> bool:
        """Check if password is known to be compromised.

        :param str password: raw password
        :raises BreachCheckUnavailableError: lookup service failed
        :return bool: True if password is in the breach corpus
        """
