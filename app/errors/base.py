"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception of the gatekeeper domain.

    Every subclass must declare a stable ``code``. Raised without a message,
    the exception reads as the first line of its class docstring.
    """

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Ensure subclass declares an error code."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    def __init__(self, message: str | None = None) -> None:
        """Set message, class summary by default."""
        if message is None:
            message = (self.__doc__ or "").strip().splitlines()[0]
        super().__init__(message)
