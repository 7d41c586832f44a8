"""Canonical parameter string and MD5 request signature.

The router verifies ``sign`` as the uppercase hex MD5 of::

    secret + key1 + value1 + key2 + value2 + ... + secret

with the protocol-level keys sorted ascending by codepoint. Business
parameters travel as one compact JSON text under ``360buy_param_json``.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping, Sequence
from datetime import datetime

from ..config import Credentials

PARAM_JSON_KEY = "360buy_param_json"
SIGN_KEY = "sign"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
RESPONSE_FIELD_SUFFIX = "_responce"


def prune_none(value: object) -> object:
    """Drop mapping entries whose value is ``None``, at every nesting level.

    Any non-text sequence becomes a list. Integral floats become ints, so
    ``1.0`` is sent as ``1``.
    """

    if isinstance(value, Mapping):
        return {key: prune_none(item) for key, item in value.items() if item is not None}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [prune_none(item) for item in value]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def serialize_business_params(params: Mapping[str, object]) -> str:
    return json.dumps(
        prune_none(params),
        ensure_ascii=False,
        separators=(",", ":"),
    )


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def build_common_params(
    method: str,
    business_params: Mapping[str, object],
    credentials: Credentials,
    timestamp: str,
    *,
    api_version: str = "1.0",
    response_format: str = "json",
    sign_method: str = "md5",
) -> dict[str, str]:
    return {
        "method": method,
        "app_key": credentials.app_key,
        "timestamp": timestamp,
        "format": response_format,
        "v": api_version,
        "sign_method": sign_method,
        PARAM_JSON_KEY: serialize_business_params(business_params),
    }


def build_canonical_string(common_params: Mapping[str, object], secret: str) -> str:
    parts = [secret]
    for key in sorted(common_params):
        parts.append(key)
        parts.append(str(common_params[key]))
    parts.append(secret)
    return "".join(parts)


def compute_signature(canonical: str) -> str:
    return hashlib.md5(canonical.encode("utf-8")).hexdigest().upper()


def sign_params(
    common_params: Mapping[str, str],
    secret: str,
) -> dict[str, str]:
    """Return the query mapping in ascending key order, ``sign`` included."""

    if SIGN_KEY in common_params:
        raise ValueError("common parameters must not already contain 'sign'")
    signature = compute_signature(build_canonical_string(common_params, secret))
    signed = dict(common_params)
    signed[SIGN_KEY] = signature
    return {key: signed[key] for key in sorted(signed)}


def response_field_name(method: str) -> str:
    """Name of the success field the router wraps a method's payload in.

    ``_responce`` is the router's own spelling.
    """

    return method.replace(".", "_") + RESPONSE_FIELD_SUFFIX


__all__ = [
    "PARAM_JSON_KEY",
    "SIGN_KEY",
    "TIMESTAMP_FORMAT",
    "RESPONSE_FIELD_SUFFIX",
    "prune_none",
    "serialize_business_params",
    "format_timestamp",
    "build_common_params",
    "build_canonical_string",
    "compute_signature",
    "sign_params",
    "response_field_name",
]
