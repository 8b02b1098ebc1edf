"""Breach checker utils.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import functools
from typing import Awaitable, Callable, TypeAlias

from .base import log
from .exceptions import BreachCheckUnavailableError

LookupType: TypeAlias = Callable[..., Awaitable[bool]]


def logger_wraps(is_stub: bool = False) -> Callable[[LookupType], LookupType]:
    """Log outcome of a breach lookup.

    The password argument is never logged, only the checker class, the
    verdict and, on failure, the error code.

    :param bool is_stub: lookup is disabled, the verdict is not logged
    """

    def wrapper(func: LookupType) -> LookupType:
        @functools.wraps(func)
        async def wrapped(checker: object, *args: object) -> bool:
            logger = log.opt(depth=1)
            checker_name = type(checker).__name__

            if is_stub:
                logger.info(f"{checker_name}: breach lookup disabled")
                return await func(checker, *args)

            try:
                breached = await func(checker, *args)
            except BreachCheckUnavailableError as err:
                logger.error(
                    f"{checker_name}: breach lookup failed "
                    f"[{err.code.name}] {err}",
                )
                raise

            outcome = "breached" if breached else "not breached"
            logger.success(f"{checker_name}: password {outcome}")
            return breached

        return wrapped

    return wrapper
