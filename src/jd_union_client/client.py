"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from types import TracebackType

from .client_shared import load_env_credentials, resolve_credentials, validate_client_config
from .config import JdUnionClientConfig
from .core.dispatcher import SignedRequestDispatcher
from .core.errors import JdUnionClientClosedError
from .core.transport import SyncTransport
from .union.operations import UnionOperations
from .union.params import UnionRequest


class JdUnionClient(UnionOperations[object]):
    """Public blocking JD Union client.

    Every operation returns the unwrapped ``<method>_responce`` value, or the
    router's ``error_response`` object when the call was rejected.
    """

    def __init__(
        self,
        app_key: str,
        secret: str,
        *,
        config: JdUnionClientConfig | None = None,
        transport: SyncTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or JdUnionClientConfig()
        validate_client_config(self._config)
        self._credentials = resolve_credentials(app_key, secret)

        self._transport = transport or SyncTransport(self._config)
        self._dispatcher = SignedRequestDispatcher(
            self._credentials,
            self._config,
            self._transport,
            clock=clock,
        )
        self._closed = False

    @classmethod
    def from_env(cls, *, config: JdUnionClientConfig | None = None) -> "JdUnionClient":
        credentials = load_env_credentials()
        return cls(credentials.app_key, credentials.secret, config=config)

    @property
    def app_key(self) -> str:
        return self._credentials.app_key

    def call(
        self,
        method: str,
        params: Mapping[str, object],
        *,
        timeout: float | None = None,
    ) -> object:
        """Send any router method with a prebuilt business parameter object."""

        self._ensure_open()
        return self._dispatcher.dispatch(method, params, timeout=timeout)

    def _send(self, request: UnionRequest, *, timeout: float | None = None) -> object:
        return self.call(request.method, request.params, timeout=timeout)

    def _ensure_open(self) -> None:
        if self._closed:
            raise JdUnionClientClosedError("JdUnionClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "JdUnionClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "JdUnionClient",
]
