"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import tzinfo

DEFAULT_BASE_URL = "https://api.jd.com/routerjson"
APP_KEY_ENV = "JD_UNION_APP_KEY"
SECRET_ENV = "JD_UNION_SECRET"


@dataclass(slots=True, frozen=True)
class Credentials:
    """Application key and shared secret issued by the JD open platform."""

    app_key: str
    secret: str = field(repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Credentials":
        source = os.environ if environ is None else environ
        missing = [name for name in (APP_KEY_ENV, SECRET_ENV) if not source.get(name)]
        if missing:
            raise ValueError(f"missing environment variables: {', '.join(missing)}")
        return cls(app_key=source[APP_KEY_ENV], secret=source[SECRET_ENV])

    def validate(self) -> None:
        if not isinstance(self.app_key, str) or not self.app_key:
            raise ValueError("credentials.app_key must be a non-empty str")
        if not isinstance(self.secret, str) or not self.secret:
            raise ValueError("credentials.secret must be a non-empty str")


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class JdUnionClientConfig:
    """Runtime configuration for the JD Union client.

    ``timezone`` controls the zone of the signed ``timestamp`` parameter;
    ``None`` uses local wall-clock time. ``raise_vendor_errors`` turns an
    ``error_response`` envelope into a raised ``JdUnionVendorError`` instead
    of returning it as the call result.
    """

    base_url: str = DEFAULT_BASE_URL
    api_version: str = "1.0"
    response_format: str = "json"
    sign_method: str = "md5"
    timezone: tzinfo | None = None
    raise_vendor_errors: bool = False

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.api_version:
            raise ValueError("api_version must not be empty")
        if self.response_format != "json":
            raise ValueError("response_format must be 'json'")
        if self.sign_method != "md5":
            raise ValueError("sign_method must be 'md5'")
        if self.timezone is not None and not isinstance(self.timezone, tzinfo):
            raise ValueError("timezone must be a tzinfo or None")
        if not isinstance(self.raise_vendor_errors, bool):
            raise ValueError("raise_vendor_errors must be bool")
        self.transport.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "APP_KEY_ENV",
    "SECRET_ENV",
    "Credentials",
    "TransportConfig",
    "JdUnionClientConfig",
]
