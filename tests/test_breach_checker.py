"""Test breach checkers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

import httpx
import pytest

from breach_checker import (
    BreachCheckResponseError,
    BreachCheckUnavailableError,
    PwnedPasswordsChecker,
    StubBreachChecker,
)
from breach_checker.base import log
from config import Settings
from tests.conftest import FakeRangeAPI

PASSWORD = "password"  # noqa: S105
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


def test_split_hash() -> None:
    """Test SHA-1 digest split to the range prefix and the suffix."""
    assert PwnedPasswordsChecker.split_hash(PASSWORD) == (
        PASSWORD_PREFIX,
        PASSWORD_SUFFIX,
    )


def test_split_hash_lone_surrogate() -> None:
    """Test any str can be hashed."""
    prefix, suffix = PwnedPasswordsChecker.split_hash("\ud800abc")
    assert len(prefix) == 5
    assert len(suffix) == 35


@pytest.mark.asyncio
async def test_pwned_checker_breached(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
) -> None:
    """Test password is breached when its suffix is in the range."""
    range_api.body = (
        "0018A45C4D1DEF81644B54AB7F969B88D65:10\r\n"
        f"{PASSWORD_SUFFIX}:9659365\r\n"
        "011053FD0102E94D6AE2F8B83D76FAF94F6:1\r\n"
    )
    assert await pwned_checker.is_breached(PASSWORD)

    (request,) = range_api.requests
    assert request.method == "GET"
    assert str(request.url) == f"https://breach.test/range/{PASSWORD_PREFIX}"
    assert request.headers["Add-Padding"] == "true"
    assert request.headers["User-Agent"] == "password-gatekeeper"


@pytest.mark.asyncio
async def test_pwned_checker_sends_prefix_only(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
) -> None:
    """Test neither the password nor the full hash is transmitted."""
    await pwned_checker.is_breached(PASSWORD)

    (request,) = range_api.requests
    assert request.content == b""
    assert PASSWORD not in str(request.url)
    assert PASSWORD_SUFFIX not in str(request.url).upper()


@pytest.mark.asyncio
async def test_pwned_checker_not_breached(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
) -> None:
    """Test password is not breached when its suffix is absent."""
    range_api.body = (
        "0018A45C4D1DEF81644B54AB7F969B88D65:10\n"
        "011053FD0102E94D6AE2F8B83D76FAF94F6:1\n"
    )
    assert not await pwned_checker.is_breached(PASSWORD)
    assert not await pwned_checker.is_breached("")


@pytest.mark.asyncio
async def test_pwned_checker_ignores_padding(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
) -> None:
    """Test zero count padding entries never match."""
    range_api.body = f"{PASSWORD_SUFFIX}:0\n"
    assert not await pwned_checker.is_breached(PASSWORD)


@pytest.mark.asyncio
async def test_pwned_checker_case_insensitive_suffix(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
) -> None:
    """Test suffixes are compared case-insensitively."""
    range_api.body = f"{PASSWORD_SUFFIX.lower()}:3\n\n"
    assert await pwned_checker.is_breached(PASSWORD)


@pytest.mark.asyncio
async def test_pwned_checker_without_padding(range_api: FakeRangeAPI) -> None:
    """Test padding header is not sent when disabled."""
    settings = Settings(
        BREACH_API_URL="https://breach.test/",
        BREACH_API_ADD_PADDING=False,
    )
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(range_api),
    ) as client:
        checker = PwnedPasswordsChecker(client, settings)
        assert not await checker.is_breached(PASSWORD)

    (request,) = range_api.requests
    assert "Add-Padding" not in request.headers
    assert str(request.url) == f"https://breach.test/range/{PASSWORD_PREFIX}"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 404, 429, 500, 503])
async def test_pwned_checker_status_error(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
    status_code: int,
) -> None:
    """Test non 200 response makes the lookup unavailable."""
    range_api.status_code = status_code
    with pytest.raises(BreachCheckUnavailableError, match=str(status_code)):
        await pwned_checker.is_breached(PASSWORD)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("Connection refused"),
        httpx.ConnectTimeout("Connect timeout"),
        httpx.ReadTimeout("Read timeout"),
    ],
)
async def test_pwned_checker_transport_error(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
    error: httpx.HTTPError,
) -> None:
    """Test transport errors make the lookup unavailable."""
    range_api.error = error
    with pytest.raises(BreachCheckUnavailableError) as exc_info:
        await pwned_checker.is_breached(PASSWORD)

    assert exc_info.value.__cause__ is error
    assert PASSWORD not in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        "not a range line\n",
        f"{PASSWORD_SUFFIX}:many\n",
    ],
)
async def test_pwned_checker_malformed_body(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
    body: str,
) -> None:
    """Test unreadable range body makes the lookup unavailable."""
    range_api.body = body
    with pytest.raises(BreachCheckResponseError):
        await pwned_checker.is_breached(PASSWORD)


@pytest.mark.asyncio
async def test_stub_checker() -> None:
    """Test stub checker reports nothing as breached."""
    checker = StubBreachChecker()
    assert not await checker.is_breached(PASSWORD)
    assert not await checker.is_breached("")


@pytest.fixture
def breach_log() -> Iterator[list[str]]:
    """Collect breach checker log messages."""
    messages: list[str] = []
    handler_id = log.add(
        messages.append,
        format="{message}",
        filter=lambda rec: rec["extra"].get("name") == "breach_checker",
    )
    yield messages
    log.remove(handler_id)


@pytest.mark.asyncio
async def test_pwned_checker_logs_outcome(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
    breach_log: list[str],
) -> None:
    """Test lookup verdict is logged without the password or its hash."""
    range_api.body = f"{PASSWORD_SUFFIX}:3\r\n"
    await pwned_checker.is_breached(PASSWORD)

    range_api.body = ""
    await pwned_checker.is_breached(PASSWORD)

    assert [message.strip() for message in breach_log] == [
        "PwnedPasswordsChecker: password breached",
        "PwnedPasswordsChecker: password not breached",
    ]
    assert not any(PASSWORD_SUFFIX in message for message in breach_log)
    assert not any(PASSWORD_PREFIX in message for message in breach_log)


@pytest.mark.asyncio
async def test_pwned_checker_logs_error_code(
    pwned_checker: PwnedPasswordsChecker,
    range_api: FakeRangeAPI,
    breach_log: list[str],
) -> None:
    """Test lookup failure is logged with its error code."""
    range_api.status_code = 503

    with pytest.raises(BreachCheckUnavailableError):
        await pwned_checker.is_breached(PASSWORD)

    (message,) = breach_log
    assert "[BREACH_CHECK_UNAVAILABLE_ERROR]" in message
    assert "Breach API status error: 503" in message


@pytest.mark.asyncio
async def test_stub_checker_logs_disabled_lookup(
    breach_log: list[str],
) -> None:
    """Test stub checker logs the disabled lookup, not a verdict."""
    assert not await StubBreachChecker().is_breached(PASSWORD)
    assert [message.strip() for message in breach_log] == [
        "StubBreachChecker: breach lookup disabled",
    ]
