"""AI 新闻 API."""

from typing import Any

from arkone.core.http import ApiClient, RequestDescriptor
from arkone.models.ai_news import AiNews, AiNewsQuery, AiNewsSaveDTO
from arkone.models.common import ApiResponse, PageResponse


class AiNewsApi:
    """AI 新闻接口 (/ai-news)."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_ai_news(self, params: AiNewsQuery) -> ApiResponse[PageResponse[AiNews]]:
        """分页查询 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url="/ai-news", method="GET", params=params.to_payload()),
            PageResponse[AiNews],
        )

    async def get_ai_news_by_id(self, id: int) -> ApiResponse[AiNews]:
        """根据 ID 获取 AI 新闻详情."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}", method="GET"),
            AiNews,
        )

    async def create_ai_news(self, data: AiNewsSaveDTO) -> ApiResponse[AiNews]:
        """创建 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url="/ai-news", method="POST", data=data.to_payload()),
            AiNews,
        )

    async def update_ai_news(self, id: int, data: AiNewsSaveDTO) -> ApiResponse[AiNews]:
        """更新 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}", method="PUT", data=data.to_payload()),
            AiNews,
        )

    async def delete_ai_news(self, id: int) -> ApiResponse[None]:
        """删除 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}", method="DELETE")
        )

    async def batch_delete_ai_news(self, ids: list[int]) -> ApiResponse[None]:
        """批量删除 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url="/ai-news/batch", method="DELETE", data=list(ids))
        )

    async def publish_ai_news(self, id: int) -> ApiResponse[None]:
        """发布 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/publish", method="PUT")
        )

    async def unpublish_ai_news(self, id: int) -> ApiResponse[None]:
        """取消发布 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/unpublish", method="PUT")
        )

    async def top_ai_news(self, id: int) -> ApiResponse[None]:
        """置顶 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/top", method="PUT")
        )

    async def untop_ai_news(self, id: int) -> ApiResponse[None]:
        """取消置顶 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/untop", method="PUT")
        )

    async def recommend_ai_news(self, id: int) -> ApiResponse[None]:
        """推荐 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/recommend", method="PUT")
        )

    async def unrecommend_ai_news(self, id: int) -> ApiResponse[None]:
        """取消推荐 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/unrecommend", method="PUT")
        )

    async def increment_ai_news_view_count(self, id: int) -> ApiResponse[None]:
        """增加 AI 新闻浏览量."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/view", method="PUT")
        )

    async def like_ai_news(self, id: int) -> ApiResponse[None]:
        """点赞 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/like", method="PUT")
        )

    async def unlike_ai_news(self, id: int) -> ApiResponse[None]:
        """取消点赞 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url=f"/ai-news/{id}/unlike", method="PUT")
        )

    async def get_recommended_ai_news(self, limit: int = 10) -> ApiResponse[list[AiNews]]:
        """获取推荐 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(
                url="/ai-news/recommended", method="GET", params={"limit": limit}
            ),
            list[AiNews],
        )

    async def get_popular_ai_news(self, limit: int = 10) -> ApiResponse[list[AiNews]]:
        """获取热门 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url="/ai-news/popular", method="GET", params={"limit": limit}),
            list[AiNews],
        )

    async def get_latest_ai_news(self, limit: int = 10) -> ApiResponse[list[AiNews]]:
        """获取最新 AI 新闻."""
        return await self._client.request(
            RequestDescriptor(url="/ai-news/latest", method="GET", params={"limit": limit}),
            list[AiNews],
        )

    async def search_ai_news(
        self, keyword: str, params: AiNewsQuery | None = None
    ) -> ApiResponse[PageResponse[AiNews]]:
        """搜索 AI 新闻."""
        query: dict[str, Any] = {"keyword": keyword}
        if params is not None:
            query.update(params.to_payload())
        return await self._client.request(
            RequestDescriptor(url="/ai-news/search", method="GET", params=query),
            PageResponse[AiNews],
        )

    async def get_ai_news_by_source(
        self, source_name: str, params: AiNewsQuery | None = None
    ) -> ApiResponse[PageResponse[AiNews]]:
        """根据来源获取 AI 新闻."""
        query: dict[str, Any] = {"sourceName": source_name}
        if params is not None:
            query.update(params.to_payload())
        return await self._client.request(
            RequestDescriptor(url="/ai-news/source", method="GET", params=query),
            PageResponse[AiNews],
        )
