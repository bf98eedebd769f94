"""核心传输层."""

from arkone.core.http import ApiClient, ApiConfig, ApiError, RequestDescriptor

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiError",
    "RequestDescriptor",
]
