"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import Credentials, JdUnionClientConfig
from .core.errors import JdUnionValidationError


def validate_client_config(config: JdUnionClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise JdUnionValidationError(str(exc)) from exc


def resolve_credentials(app_key: str, secret: str) -> Credentials:
    credentials = Credentials(app_key=app_key, secret=secret)
    try:
        credentials.validate()
    except ValueError as exc:
        raise JdUnionValidationError(str(exc)) from exc
    return credentials


def load_env_credentials() -> Credentials:
    try:
        credentials = Credentials.from_env()
    except ValueError as exc:
        raise JdUnionValidationError(str(exc)) from exc
    return resolve_credentials(credentials.app_key, credentials.secret)


__all__ = [
    "validate_client_config",
    "resolve_credentials",
    "load_env_credentials",
]
