"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime
from types import TracebackType

from .client_shared import load_env_credentials, resolve_credentials, validate_client_config
from .config import JdUnionClientConfig
from .core.async_transport import AsyncTransport
from .core.dispatcher import AsyncSignedRequestDispatcher
from .core.errors import JdUnionClientClosedError
from .union.operations import UnionOperations
from .union.params import UnionRequest


class AsyncJdUnionClient(UnionOperations[Awaitable[object]]):
    """Public async JD Union client.

    Operations are awaitable. One instance may run many calls concurrently.
    """

    def __init__(
        self,
        app_key: str,
        secret: str,
        *,
        config: JdUnionClientConfig | None = None,
        transport: AsyncTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or JdUnionClientConfig()
        validate_client_config(self._config)
        self._credentials = resolve_credentials(app_key, secret)

        self._transport = transport or AsyncTransport(self._config)
        self._dispatcher = AsyncSignedRequestDispatcher(
            self._credentials,
            self._config,
            self._transport,
            clock=clock,
        )
        self._closed = False

    @classmethod
    def from_env(cls, *, config: JdUnionClientConfig | None = None) -> "AsyncJdUnionClient":
        credentials = load_env_credentials()
        return cls(credentials.app_key, credentials.secret, config=config)

    @property
    def app_key(self) -> str:
        return self._credentials.app_key

    async def call(
        self,
        method: str,
        params: Mapping[str, object],
        *,
        timeout: float | None = None,
    ) -> object:
        """Send any router method with a prebuilt business parameter object."""

        self._ensure_open()
        return await self._dispatcher.dispatch(method, params, timeout=timeout)

    async def _send(self, request: UnionRequest, *, timeout: float | None = None) -> object:
        return await self.call(request.method, request.params, timeout=timeout)

    def _ensure_open(self) -> None:
        if self._closed:
            raise JdUnionClientClosedError("AsyncJdUnionClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncJdUnionClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncJdUnionClient",
]
