"""ArkOne 后端 REST API 传输层."""

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from arkone.config import Settings, get_settings
from arkone.models.common import ApiResponse

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass
class ApiConfig:
    """后端连接配置."""

    base_url: str
    timeout: float = 30.0
    success_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ApiConfig":
        """从应用配置构建."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout_seconds,
            success_code=settings.api_success_code,
            headers=dict(settings.api_headers),
        )


@dataclass(frozen=True)
class RequestDescriptor:
    """单次请求描述."""

    url: str
    method: HttpMethod = "GET"
    params: dict[str, Any] | None = None
    data: Any = None


class ApiError(Exception):
    """业务错误：HTTP 2xx 但响应 code 表示失败."""

    def __init__(self, message: str, code: int | None, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        return f"[Code: {self.code}] {self.message}"


class ApiClient:
    """发送请求描述并解析统一响应结构."""

    def __init__(
        self,
        config: ApiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
            transport=transport,
        )

    async def close(self) -> None:
        """关闭客户端."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def request(
        self,
        descriptor: RequestDescriptor,
        response_type: Any = None,
    ) -> ApiResponse[Any]:
        """
        发送请求并返回解析后的响应.

        网络错误 (httpx.TransportError) 与非 2xx 状态 (httpx.HTTPStatusError)
        原样抛出；响应 code 非成功时抛出 ApiError。
        """
        params = _clean_params(descriptor.params)
        logger.debug(f"{descriptor.method} {descriptor.url} params={params}")

        kwargs: dict[str, Any] = {}
        if descriptor.data is not None:
            kwargs["json"] = descriptor.data

        response = await self._client.request(
            descriptor.method,
            descriptor.url,
            params=params,
            **kwargs,
        )
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            msg = f"响应格式错误: 期望 JSON 对象，实际为 {type(payload).__name__}"
            logger.warning(f"{descriptor.method} {descriptor.url} - {msg}")
            raise ApiError(msg, None, payload)

        code = payload.get("code")
        if code != self.config.success_code:
            message = payload.get("message") or ""
            logger.warning(
                f"接口返回错误: {descriptor.method} {descriptor.url} - [{code}] {message}"
            )
            raise ApiError(message, code, payload.get("data"))

        model = ApiResponse[Any] if response_type is None else ApiResponse[response_type]
        return model.model_validate(payload)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """去掉值为 None 的查询参数（未传的可选参数不出现在 URL 中）."""
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}
