"""Sync HTTP transport for the JD Union router."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import JdUnionClientConfig
from .errors import JdUnionProtocolError, JdUnionTransportError
from .response_parsing import parse_json_payload
from .transport_shared import (
    build_default_timeout,
    check_http_status,
    map_transport_exception,
    resolve_request_timeout,
)

logger = logging.getLogger("jd_union_client")


class SyncTransportClient(Protocol):
    def get(self, url: str, *, params: Mapping[str, str], timeout: object) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Blocking single-shot GET transport. No retries."""

    def __init__(
        self,
        config: JdUnionClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=build_default_timeout(config))

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def request(
        self,
        params: Mapping[str, str],
        *,
        timeout: float | None = None,
    ) -> dict[str, object]:
        if self._closed:
            raise JdUnionTransportError("transport is already closed")

        method = params.get("method")
        request_timeout = resolve_request_timeout(timeout)
        try:
            response = self._client.get(
                self._config.base_url,
                params=params,
                timeout=request_timeout,
            )
        except Exception as exc:
            mapped = map_transport_exception(exc)
            logger.error(
                "request transport error method=%s cause=%s error=%s",
                method,
                mapped.cause,
                exc.__class__.__name__,
            )
            raise mapped from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received method=%s http_status=%s", method, http_status)
        try:
            check_http_status(http_status)
            return parse_json_payload(response, http_status=http_status)
        except JdUnionTransportError:
            logger.error("request failed method=%s http_status=%s", method, http_status)
            raise
        except JdUnionProtocolError:
            logger.error("response parse error method=%s http_status=%s", method, http_status)
            raise


__all__ = [
    "SyncTransport",
]
