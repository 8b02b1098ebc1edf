"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from typing import Literal

from pydantic import BaseModel, HttpUrl, PositiveFloat, PositiveInt

BreachCheckFailureMode = Literal["closed", "open", "raise"]


class Settings(BaseModel):
    """Password gatekeeper settings."""

    BREACH_CHECK_ENABLED: bool = True
    BREACH_API_URL: HttpUrl = HttpUrl("https://api.pwnedpasswords.com")
    BREACH_API_TIMEOUT_SECONDS: PositiveFloat = 5.0
    BREACH_API_CONNECT_TIMEOUT_SECONDS: PositiveFloat = 3.0
    BREACH_API_MAX_CONN: PositiveInt = 20
    BREACH_API_MAX_KEEPALIVE: PositiveInt = 10
    BREACH_API_ADD_PADDING: bool = True
    BREACH_API_USER_AGENT: str = "password-gatekeeper"

    # what to do with a password when the breach lookup is unreachable
    BREACH_CHECK_FAILURE_MODE: BreachCheckFailureMode = "closed"

    @property
    def breach_api_base_url(self) -> str:
        """Breach API url without the trailing slash."""
        return str(self.BREACH_API_URL).rstrip("/")

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
