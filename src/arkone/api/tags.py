"""标签 API."""

from arkone.core.http import ApiClient, RequestDescriptor
from arkone.models.category import EnableStatus
from arkone.models.common import ApiResponse, PageResponse
from arkone.models.tag import (
    Tag,
    TagCloudItem,
    TagQuery,
    TagSaveDTO,
    TagStats,
    TagType,
)


class TagApi:
    """标签接口 (/tags)."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_tags(self, params: TagQuery) -> ApiResponse[PageResponse[Tag]]:
        """分页查询标签."""
        return await self._client.request(
            RequestDescriptor(url="/tags", method="GET", params=params.to_payload()),
            PageResponse[Tag],
        )

    async def get_tag_by_id(self, id: int) -> ApiResponse[Tag]:
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{id}", method="GET"),
            Tag,
        )

    async def create_tag(self, data: TagSaveDTO) -> ApiResponse[Tag]:
        return await self._client.request(
            RequestDescriptor(url="/tags", method="POST", data=data.to_payload()),
            Tag,
        )

    async def update_tag(self, id: int, data: TagSaveDTO) -> ApiResponse[Tag]:
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{id}", method="PUT", data=data.to_payload()),
            Tag,
        )

    async def delete_tag(self, id: int) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{id}", method="DELETE")
        )

    async def batch_delete_tags(self, ids: list[int]) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(url="/tags/batch", method="DELETE", data=list(ids))
        )

    async def get_all_enabled_tags(self) -> ApiResponse[list[Tag]]:
        """获取所有启用的标签."""
        return await self._client.request(
            RequestDescriptor(url="/tags/enabled", method="GET"),
            list[Tag],
        )

    async def get_tags_by_type(self, type: TagType) -> ApiResponse[list[Tag]]:
        """根据类型获取标签列表."""
        return await self._client.request(
            RequestDescriptor(url="/tags/type", method="GET", params={"type": type}),
            list[Tag],
        )

    async def search_tags(self, keyword: str) -> ApiResponse[list[Tag]]:
        """搜索标签."""
        return await self._client.request(
            RequestDescriptor(url="/tags/search", method="GET", params={"keyword": keyword}),
            list[Tag],
        )

    async def check_tag_name_exists(
        self, name: str, exclude_id: int | None = None
    ) -> ApiResponse[bool]:
        """检查标签名称是否存在."""
        return await self._client.request(
            RequestDescriptor(
                url="/tags/exists",
                method="GET",
                params={"name": name, "excludeId": exclude_id},
            ),
            bool,
        )

    async def get_tag_content_count(self, tag_id: int) -> ApiResponse[int]:
        """获取标签下的内容数量."""
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{tag_id}/count", method="GET"),
            int,
        )

    async def get_popular_tags(self, limit: int = 20) -> ApiResponse[list[Tag]]:
        """获取热门标签."""
        return await self._client.request(
            RequestDescriptor(url="/tags/popular", method="GET", params={"limit": limit}),
            list[Tag],
        )

    async def get_tag_stats(self) -> ApiResponse[TagStats]:
        """获取标签统计信息."""
        return await self._client.request(
            RequestDescriptor(url="/tags/stats", method="GET"),
            TagStats,
        )

    async def get_or_create_tag_by_name(
        self, name: str, type: TagType = "COMMON"
    ) -> ApiResponse[Tag]:
        """
        根据名称获取或创建标签.

        响应中无法区分是已有标签还是新建的标签。
        """
        return await self._client.request(
            RequestDescriptor(
                url="/tags/get-or-create",
                method="POST",
                data={"name": name, "type": type},
            ),
            Tag,
        )

    async def batch_get_or_create_tags_by_names(
        self, names: list[str], type: TagType = "COMMON"
    ) -> ApiResponse[list[Tag]]:
        """批量根据名称获取或创建标签."""
        return await self._client.request(
            RequestDescriptor(
                url="/tags/batch-get-or-create",
                method="POST",
                data={"names": list(names), "type": type},
            ),
            list[Tag],
        )

    async def update_tag_status(self, id: int, status: EnableStatus) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{id}/status", method="PUT", data={"status": status})
        )

    async def update_tag_sort(self, id: int, sort_order: int) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(
                url=f"/tags/{id}/sort", method="PUT", data={"sortOrder": sort_order}
            )
        )

    async def update_tag_color(self, id: int, color: str) -> ApiResponse[None]:
        """更新标签颜色."""
        return await self._client.request(
            RequestDescriptor(url=f"/tags/{id}/color", method="PUT", data={"color": color})
        )

    async def get_tag_cloud(self, limit: int = 50) -> ApiResponse[list[TagCloudItem]]:
        """获取标签云数据."""
        return await self._client.request(
            RequestDescriptor(url="/tags/cloud", method="GET", params={"limit": limit}),
            list[TagCloudItem],
        )
