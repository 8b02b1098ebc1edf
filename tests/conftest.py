"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from typing import AsyncIterator
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from breach_checker import AbstractBreachChecker, PwnedPasswordsChecker
from config import Settings
from password_validator import PasswordCheckUseCase, PasswordValidator

BREACH_API_URL = "https://breach.test"


@dataclass
class FakeRangeAPI:
    """Range API handler for httpx.MockTransport."""

    body: str = ""
    status_code: int = 200
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        """Record request and answer with the configured body."""
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)


def make_password(length: int) -> str:
    """Make password passing every structural rule but length."""
    return ("Aa1!" + "bcdefghijk" * 10)[:length]


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings(BREACH_API_URL=BREACH_API_URL)


@pytest.fixture
def password_validator() -> PasswordValidator:
    """Get validator with the default policy."""
    return PasswordValidator.default()


@pytest.fixture
def breach_checker() -> AsyncMock:
    """Get breach checker mock, nothing is breached by default."""
    checker = AsyncMock(spec=AbstractBreachChecker)
    checker.is_breached.return_value = False
    return checker


@pytest.fixture
def password_check_use_case(
    password_validator: PasswordValidator,
    breach_checker: AsyncMock,
    settings: Settings,
) -> PasswordCheckUseCase:
    """Get use case with mocked breach checker."""
    return PasswordCheckUseCase(password_validator, breach_checker, settings)


@pytest.fixture
def range_api() -> FakeRangeAPI:
    """Get fake range API."""
    return FakeRangeAPI()


@pytest_asyncio.fixture
async def pwned_checker(
    range_api: FakeRangeAPI,
    settings: Settings,
) -> AsyncIterator[PwnedPasswordsChecker]:
    """Get Pwned Passwords checker on top of the fake range API."""
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(range_api),
    ) as client:
        yield PwnedPasswordsChecker(client, settings)
