"""Pwned Passwords range API integration.

The password is never sent: only the first 5 hex characters of its SHA-1
hash go over the wire, the returned suffixes are matched locally.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import hashlib
from typing import ClassVar

import httpx

from config import Settings

from .base import AbstractBreachChecker
from .exceptions import BreachCheckResponseError, BreachCheckUnavailableError
from .utils import logger_wraps


class PwnedPasswordsChecker(AbstractBreachChecker):
    """Breach checker backed by the Pwned Passwords k-anonymity API."""

    RANGE_URL: ClassVar[str] = "/range/{prefix}"
    PREFIX_LENGTH: ClassVar[int] = 5

    _client: httpx.AsyncClient
    _settings: Settings

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
    ) -> None:
        """Set web client and settings.

        :param httpx.AsyncClient client: client for making queries (activated)
        :param Settings settings: app settings
        """
        self._client = client
        self._settings = settings

    @classmethod
    def split_hash(cls, password: str) -> tuple[str, str]:
        """Get uppercase SHA-1 hex digest of password split to prefix, suffix.

        Lone surrogates are hashed as is, any str is accepted.
        """
        digest = hashlib.sha1(
            password.encode("utf-8", "surrogatepass"),
            usedforsecurity=False,
        ).hexdigest().upper()
        return digest[: cls.PREFIX_LENGTH], digest[cls.PREFIX_LENGTH :]

    def _get_headers(self) -> dict[str, str]:
        headers = {"User-Agent": self._settings.BREACH_API_USER_AGENT}
        if self._settings.BREACH_API_ADD_PADDING:
            headers["Add-Padding"] = "true"
        return headers

    @staticmethod
    def _find_suffix(body: str, suffix: str) -> bool:
        """Search `SUFFIX:COUNT` lines for suffix.

        Padding lines carry a zero count and never match.

        :raises BreachCheckResponseError: line is not `SUFFIX:COUNT`
        """
        for line in body.splitlines():
            if not line.strip():
                continue

            hash_suffix, sep, count = line.partition(":")
            if not sep:
                raise BreachCheckResponseError("Malformed range line")

            try:
                occurrences = int(count)
            except ValueError as err:
                raise BreachCheckResponseError(
                    "Malformed range count",
                ) from err

            if hash_suffix.strip().upper() == suffix and occurrences > 0:
                return True

        return False

    @logger_wraps()
    async def is_breached(self, password: str) -> bool:
        """Query hash range of password and match its suffix.

        :param str password: raw password
        :raises BreachCheckUnavailableError: transport error or bad status
        :raises BreachCheckResponseError: unreadable body
        :return bool: True if password is breached
        """
        prefix, suffix = self.split_hash(password)
        url = self._settings.breach_api_base_url + self.RANGE_URL.format(
            prefix=prefix,
        )

        try:
            response = await self._client.get(
                url,
                headers=self._get_headers(),
            )
        except httpx.HTTPError as err:
            raise BreachCheckUnavailableError(
                f"Breach API request failed: {type(err).__name__}",
            ) from err

        if response.status_code != 200:
            raise BreachCheckUnavailableError(
                f"Breach API status error: {response.status_code}",
            )

        return self._find_suffix(response.text, suffix)
