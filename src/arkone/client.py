"""客户端入口."""

from arkone.api import AiNewsApi, ArticleApi, CategoryApi, TagApi
from arkone.config import Settings
from arkone.core.http import ApiClient, ApiConfig


class ArkOneClient:
    """聚合四类资源接口，共享同一个 HTTP 客户端."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self.articles = ArticleApi(api)
        self.ai_news = AiNewsApi(api)
        self.categories = CategoryApi(api)
        self.tags = TagApi(api)

    async def close(self) -> None:
        """关闭客户端."""
        await self.api.close()

    async def __aenter__(self) -> "ArkOneClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def create_client(settings: Settings | None = None) -> ArkOneClient:
    """根据配置创建客户端."""
    return ArkOneClient(ApiClient(ApiConfig.from_settings(settings)))
