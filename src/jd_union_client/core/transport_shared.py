"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import httpx

from ..config import JdUnionClientConfig
from .errors import (
    JdUnionError,
    JdUnionTimeoutError,
    JdUnionTransportError,
    JdUnionValidationError,
)


def build_default_timeout(config: JdUnionClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def resolve_request_timeout(
    timeout: float | None,
) -> httpx.Timeout | object:
    if timeout is None:
        return httpx.USE_CLIENT_DEFAULT
    if timeout <= 0:
        raise JdUnionValidationError("timeout must be > 0")
    return httpx.Timeout(timeout)


def map_transport_exception(exc: Exception) -> JdUnionError:
    if isinstance(exc, httpx.TimeoutException):
        return JdUnionTimeoutError("request timed out", cause="timeout")
    return JdUnionTransportError("network/transport error", cause="network")


def check_http_status(http_status: int | None) -> None:
    if http_status is not None and http_status >= 400:
        raise JdUnionTransportError(
            f"unexpected HTTP status {http_status}",
            http_status=http_status,
            cause="http_status",
        )


__all__ = [
    "build_default_timeout",
    "resolve_request_timeout",
    "map_transport_exception",
    "check_http_status",
]
