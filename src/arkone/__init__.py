"""ArkOne 内容平台客户端."""

from arkone.client import ArkOneClient, create_client
from arkone.core.http import ApiClient, ApiConfig, ApiError, RequestDescriptor

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiError",
    "ArkOneClient",
    "RequestDescriptor",
    "create_client",
]

__version__ = "0.1.0"
