"""Error types and vendor error extraction."""

from __future__ import annotations

from collections.abc import Mapping

ERROR_RESPONSE_KEY = "error_response"


def extract_error_code(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("code")
    return str(value) if value is not None else None


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    # The router reports zh_desc/en_desc; some gateways answer with msg.
    for key in ("en_desc", "zh_desc", "msg"):
        value = payload.get(key)
        if value is not None:
            return str(value)
    return None


class JdUnionError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class JdUnionTransportError(JdUnionError):
    """Network/transport-level failure or non-success HTTP status."""


class JdUnionTimeoutError(JdUnionTransportError):
    """Request did not complete within the configured timeout."""


class JdUnionClientClosedError(JdUnionError):
    """Raised when client is used after close."""


class JdUnionValidationError(JdUnionError):
    """Invalid client configuration or credentials."""


class JdUnionProtocolError(JdUnionError):
    """Response body is not a JSON object."""


class JdUnionVendorError(JdUnionError):
    """The router answered with an ``error_response`` envelope.

    Only raised when ``raise_vendor_errors`` is enabled; by default the
    envelope is returned to the caller as-is.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        payload: Mapping[str, object],
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, cause="vendor")
        self.method = method
        self.payload = payload
        self.code = extract_error_code(payload)


def vendor_error_from_payload(
    payload: object,
    *,
    method: str,
    http_status: int | None = None,
) -> JdUnionVendorError:
    body: Mapping[str, object] = payload if isinstance(payload, Mapping) else {}
    message = extract_error_message(body) or "JD Union router rejected the request"
    code = extract_error_code(body)
    if code is not None:
        message = f"[{code}] {message}"
    return JdUnionVendorError(
        message,
        method=method,
        payload=body,
        http_status=http_status,
    )


__all__ = [
    "ERROR_RESPONSE_KEY",
    "JdUnionError",
    "JdUnionTransportError",
    "JdUnionTimeoutError",
    "JdUnionClientClosedError",
    "JdUnionValidationError",
    "JdUnionProtocolError",
    "JdUnionVendorError",
    "extract_error_code",
    "extract_error_message",
    "vendor_error_from_payload",
]
