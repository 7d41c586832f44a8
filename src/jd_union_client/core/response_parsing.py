"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import ERROR_RESPONSE_KEY, JdUnionProtocolError
from .signing import response_field_name


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise JdUnionProtocolError(
            "response body is not valid JSON",
            http_status=http_status,
            cause="parse",
        ) from exc

    if not isinstance(payload, dict):
        raise JdUnionProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
            cause="parse",
        )
    return payload


def is_error_envelope(payload: Mapping[str, object]) -> bool:
    return payload.get(ERROR_RESPONSE_KEY) is not None


def unwrap_envelope(
    payload: Mapping[str, object],
    *,
    method: str,
) -> tuple[object, bool]:
    """Return ``(value, is_vendor_error)`` for a parsed router reply.

    A missing success field yields ``None`` rather than an error.
    """

    if is_error_envelope(payload):
        return payload[ERROR_RESPONSE_KEY], True
    return payload.get(response_field_name(method)), False


__all__ = [
    "parse_json_payload",
    "is_error_envelope",
    "unwrap_envelope",
]
