"""Public package exports for JD Union client."""

from .async_client import AsyncJdUnionClient
from .client import JdUnionClient
from .config import Credentials, JdUnionClientConfig

__all__ = ["JdUnionClient", "AsyncJdUnionClient", "JdUnionClientConfig", "Credentials"]
