"""DI Provider for the password gatekeeper.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator, NewType

import httpx
from dishka import (
    AsyncContainer,
    Provider,
    Scope,
    from_context,
    make_async_container,
    provide,
)

from breach_checker import (
    AbstractBreachChecker,
    PwnedPasswordsChecker,
    StubBreachChecker,
)
from config import Settings
from password_validator import PasswordCheckUseCase, PasswordValidator

BreachHTTPClient = NewType("BreachHTTPClient", httpx.AsyncClient)


class PasswordCheckProvider(Provider):
    """Provider for password checks."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_password_validator(self) -> PasswordValidator:
        """Get validator with the fixed composite policy."""
        return PasswordValidator.default()

    password_check_use_case = provide(
        PasswordCheckUseCase,
        scope=Scope.REQUEST,
    )


class PwnedPasswordsProvider(Provider):
    """Provider for the Pwned Passwords breach lookup."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_breach_http_client(
        self,
        settings: Settings,
    ) -> AsyncIterator[BreachHTTPClient]:
        """Get async client for the breach API, closed with the container.

        :param Settings settings: app settings
        :yield BreachHTTPClient: activated client
        """
        limits = httpx.Limits(
            max_connections=settings.BREACH_API_MAX_CONN,
            max_keepalive_connections=settings.BREACH_API_MAX_KEEPALIVE,
        )
        timeout = httpx.Timeout(
            settings.BREACH_API_TIMEOUT_SECONDS,
            connect=settings.BREACH_API_CONNECT_TIMEOUT_SECONDS,
        )
        async with httpx.AsyncClient(
            timeout=timeout,
            limits=limits,
        ) as client:
            yield BreachHTTPClient(client)

    @provide(scope=Scope.APP)
    def get_breach_checker(
        self,
        client: BreachHTTPClient,
        settings: Settings,
    ) -> AbstractBreachChecker:
        """Get Pwned Passwords checker."""
        return PwnedPasswordsChecker(client, settings)


class StubBreachCheckerProvider(Provider):
    """Provider for a disabled breach lookup, no HTTP client is built."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_breach_checker(self) -> AbstractBreachChecker:
        """Get stub breach checker."""
        return StubBreachChecker()


def get_breach_checker_provider(settings: Settings) -> Provider:
    """Get breach lookup provider, a stub one if lookup is disabled."""
    if settings.BREACH_CHECK_ENABLED:
        return PwnedPasswordsProvider()
    return StubBreachCheckerProvider()


def make_password_check_container(
    settings: Settings,
    *providers: Provider,
) -> AsyncContainer:
    """Create async container, extra providers override the defaults."""
    return make_async_container(
        PasswordCheckProvider(),
        get_breach_checker_provider(settings),
        *providers,
        context={Settings: settings},
    )
