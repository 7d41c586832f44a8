"""Signed request dispatch: canonicalize, sign, send, unwrap.

The method name is passed explicitly through every step of a call, so one
dispatcher can serve concurrent calls for different methods.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Protocol

from ..config import Credentials, JdUnionClientConfig
from .errors import extract_error_code, vendor_error_from_payload
from .response_parsing import unwrap_envelope
from .signing import build_common_params, format_timestamp, sign_params

logger = logging.getLogger("jd_union_client")


class SyncRequester(Protocol):
    def request(
        self,
        params: Mapping[str, str],
        *,
        timeout: float | None = None,
    ) -> dict[str, object]: ...


class AsyncRequester(Protocol):
    async def request(
        self,
        params: Mapping[str, str],
        *,
        timeout: float | None = None,
    ) -> dict[str, object]: ...


class _DispatcherBase:
    def __init__(
        self,
        credentials: Credentials,
        config: JdUnionClientConfig,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._credentials = credentials
        self._config = config
        self._clock = clock or (lambda: datetime.now(config.timezone))

    def prepare(self, method: str, params: Mapping[str, object]) -> dict[str, str]:
        common = build_common_params(
            method,
            params,
            self._credentials,
            format_timestamp(self._clock()),
            api_version=self._config.api_version,
            response_format=self._config.response_format,
            sign_method=self._config.sign_method,
        )
        return sign_params(common, self._credentials.secret)

    def finish(self, payload: Mapping[str, object], *, method: str) -> object:
        value, is_vendor_error = unwrap_envelope(payload, method=method)
        if not is_vendor_error:
            logger.info("request success method=%s", method)
            return value

        logger.warning(
            "router returned error_response method=%s code=%s",
            method,
            extract_error_code(value if isinstance(value, Mapping) else None),
        )
        if self._config.raise_vendor_errors:
            raise vendor_error_from_payload(value, method=method)
        return value


class SignedRequestDispatcher(_DispatcherBase):
    """Blocking dispatcher over a sync transport."""

    def __init__(
        self,
        credentials: Credentials,
        config: JdUnionClientConfig,
        transport: SyncRequester,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(credentials, config, clock=clock)
        self._transport = transport

    def dispatch(
        self,
        method: str,
        params: Mapping[str, object],
        *,
        timeout: float | None = None,
    ) -> object:
        signed = self.prepare(method, params)
        logger.debug("request start method=%s", method)
        payload = self._transport.request(signed, timeout=timeout)
        return self.finish(payload, method=method)


class AsyncSignedRequestDispatcher(_DispatcherBase):
    """Dispatcher over an async transport."""

    def __init__(
        self,
        credentials: Credentials,
        config: JdUnionClientConfig,
        transport: AsyncRequester,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(credentials, config, clock=clock)
        self._transport = transport

    async def dispatch(
        self,
        method: str,
        params: Mapping[str, object],
        *,
        timeout: float | None = None,
    ) -> object:
        signed = self.prepare(method, params)
        logger.debug("request start method=%s", method)
        payload = await self._transport.request(signed, timeout=timeout)
        return self.finish(payload, method=method)


__all__ = [
    "SignedRequestDispatcher",
    "AsyncSignedRequestDispatcher",
]
