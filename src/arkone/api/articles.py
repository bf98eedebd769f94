"""文章 API."""

from typing import Any

from arkone.core.http import ApiClient, RequestDescriptor
from arkone.models.article import Article, ArticleQuery, ArticleSaveDTO
from arkone.models.common import ApiResponse, PageResponse


class ArticleApi:
    """文章接口 (/articles)."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_articles(
        self, params: ArticleQuery
    ) -> ApiResponse[PageResponse[Article]]:
        """分页查询文章."""
        return await self._client.request(
            RequestDescriptor(url="/articles", method="GET", params=params.to_payload()),
            PageResponse[Article],
        )

    async def get_article_by_id(self, id: int) -> ApiResponse[Article]:
        """根据 ID 获取文章详情."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}", method="GET"),
            Article,
        )

    async def create_article(self, data: ArticleSaveDTO) -> ApiResponse[Article]:
        """创建文章."""
        return await self._client.request(
            RequestDescriptor(url="/articles", method="POST", data=data.to_payload()),
            Article,
        )

    async def update_article(
        self, id: int, data: ArticleSaveDTO
    ) -> ApiResponse[Article]:
        """更新文章."""
        return await self._client.request(
            RequestDescriptor(
                url=f"/articles/{id}", method="PUT", data=data.to_payload()
            ),
            Article,
        )

    async def delete_article(self, id: int) -> ApiResponse[None]:
        """删除文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}", method="DELETE")
        )

    async def batch_delete_articles(self, ids: list[int]) -> ApiResponse[None]:
        """批量删除文章."""
        return await self._client.request(
            RequestDescriptor(url="/articles/batch", method="DELETE", data=list(ids))
        )

    async def publish_article(self, id: int) -> ApiResponse[None]:
        """发布文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/publish", method="PUT")
        )

    async def unpublish_article(self, id: int) -> ApiResponse[None]:
        """取消发布文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/unpublish", method="PUT")
        )

    async def top_article(self, id: int) -> ApiResponse[None]:
        """置顶文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/top", method="PUT")
        )

    async def untop_article(self, id: int) -> ApiResponse[None]:
        """取消置顶文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/untop", method="PUT")
        )

    async def recommend_article(self, id: int) -> ApiResponse[None]:
        """推荐文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/recommend", method="PUT")
        )

    async def unrecommend_article(self, id: int) -> ApiResponse[None]:
        """取消推荐文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/unrecommend", method="PUT")
        )

    async def increment_view_count(self, id: int) -> ApiResponse[None]:
        """增加文章浏览量."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/view", method="PUT")
        )

    async def like_article(self, id: int) -> ApiResponse[None]:
        """点赞文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/like", method="PUT")
        )

    async def unlike_article(self, id: int) -> ApiResponse[None]:
        """取消点赞文章."""
        return await self._client.request(
            RequestDescriptor(url=f"/articles/{id}/unlike", method="PUT")
        )

    async def get_recommended_articles(
        self, limit: int = 10
    ) -> ApiResponse[list[Article]]:
        """获取推荐文章."""
        return await self._client.request(
            RequestDescriptor(
                url="/articles/recommended", method="GET", params={"limit": limit}
            ),
            list[Article],
        )

    async def get_popular_articles(self, limit: int = 10) -> ApiResponse[list[Article]]:
        """获取热门文章."""
        return await self._client.request(
            RequestDescriptor(
                url="/articles/popular", method="GET", params={"limit": limit}
            ),
            list[Article],
        )

    async def get_latest_articles(self, limit: int = 10) -> ApiResponse[list[Article]]:
        """获取最新文章."""
        return await self._client.request(
            RequestDescriptor(
                url="/articles/latest", method="GET", params={"limit": limit}
            ),
            list[Article],
        )

    async def search_articles(
        self, keyword: str, params: ArticleQuery | None = None
    ) -> ApiResponse[PageResponse[Article]]:
        """搜索文章（keyword 与其余查询条件合并为一组参数）."""
        query: dict[str, Any] = {"keyword": keyword}
        if params is not None:
            query.update(params.to_payload())
        return await self._client.request(
            RequestDescriptor(url="/articles/search", method="GET", params=query),
            PageResponse[Article],
        )
