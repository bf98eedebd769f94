"""测试配置和 fixtures."""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from arkone.client import ArkOneClient
from arkone.core.http import ApiClient, ApiConfig

BASE_URL = "http://test/api"


class RecordingBackend:
    """记录所有请求并返回预设的统一响应."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"code": 200, "message": "操作成功", "data": None}

    def reply(self, data: Any = None, code: int = 200, message: str = "操作成功") -> None:
        self.payload = {"code": code, "message": message, "data": data}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def backend() -> RecordingBackend:
    """创建记录请求的假后端."""
    return RecordingBackend()


@pytest_asyncio.fixture
async def api_client(backend: RecordingBackend) -> AsyncGenerator[ApiClient, None]:
    """创建走 MockTransport 的传输层客户端."""
    client = ApiClient(
        ApiConfig(base_url=BASE_URL),
        transport=httpx.MockTransport(backend.handler),
    )
    yield client
    await client.close()


@pytest.fixture
def arkone(api_client: ApiClient) -> ArkOneClient:
    """创建测试用的聚合客户端."""
    return ArkOneClient(api_client)


def article_payload(**overrides: Any) -> dict[str, Any]:
    """构造服务端返回的文章 JSON."""
    payload = {
        "id": 1,
        "title": "Article 1",
        "content": "正文",
        "summary": "摘要",
        "categoryId": 3,
        "categoryName": "技术",
        "tags": ["LLM", "Agent"],
        "status": "PUBLISHED",
        "viewCount": 10,
        "likeCount": 2,
        "commentCount": 0,
        "isTop": False,
        "isRecommend": True,
        "publishTime": "2024-01-01 10:00:00",
        "createTime": "2024-01-01 09:00:00",
        "updateTime": "2024-01-01 10:00:00",
    }
    payload.update(overrides)
    return payload


def page_payload(records: list[dict[str, Any]]) -> dict[str, Any]:
    """构造分页响应 JSON."""
    return {
        "records": records,
        "total": len(records),
        "size": 10,
        "current": 1,
        "pages": 1,
    }
