"""分类 API."""

from arkone.core.http import ApiClient, RequestDescriptor
from arkone.models.category import (
    Category,
    CategorySaveDTO,
    CategoryType,
    EnableStatus,
)
from arkone.models.common import ApiResponse


class CategoryApi:
    """分类接口 (/categories)."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_categories_by_type(
        self, type: CategoryType
    ) -> ApiResponse[list[Category]]:
        """根据类型获取分类列表."""
        return await self._client.request(
            RequestDescriptor(url="/categories/type", method="GET", params={"type": type}),
            list[Category],
        )

    async def get_all_enabled_categories(self) -> ApiResponse[list[Category]]:
        """获取所有启用的分类."""
        return await self._client.request(
            RequestDescriptor(url="/categories/enabled", method="GET"),
            list[Category],
        )

    async def get_categories_by_parent_id(
        self, parent_id: int
    ) -> ApiResponse[list[Category]]:
        """根据父分类 ID 获取子分类."""
        return await self._client.request(
            RequestDescriptor(
                url="/categories/children",
                method="GET",
                params={"parentId": parent_id},
            ),
            list[Category],
        )

    async def get_category_by_id(self, id: int) -> ApiResponse[Category]:
        return await self._client.request(
            RequestDescriptor(url=f"/categories/{id}", method="GET"),
            Category,
        )

    async def create_category(self, data: CategorySaveDTO) -> ApiResponse[Category]:
        return await self._client.request(
            RequestDescriptor(url="/categories", method="POST", data=data.to_payload()),
            Category,
        )

    async def update_category(
        self, id: int, data: CategorySaveDTO
    ) -> ApiResponse[Category]:
        return await self._client.request(
            RequestDescriptor(
                url=f"/categories/{id}", method="PUT", data=data.to_payload()
            ),
            Category,
        )

    async def delete_category(self, id: int) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(url=f"/categories/{id}", method="DELETE")
        )

    async def check_category_name_exists(
        self, name: str, exclude_id: int | None = None
    ) -> ApiResponse[bool]:
        """检查分类名称是否存在（编辑时传 exclude_id 排除自身）."""
        return await self._client.request(
            RequestDescriptor(
                url="/categories/exists",
                method="GET",
                params={"name": name, "excludeId": exclude_id},
            ),
            bool,
        )

    async def get_category_content_count(self, category_id: int) -> ApiResponse[int]:
        """获取分类下的内容数量."""
        return await self._client.request(
            RequestDescriptor(url=f"/categories/{category_id}/count", method="GET"),
            int,
        )

    async def build_category_tree(
        self, type: CategoryType | None = None
    ) -> ApiResponse[list[Category]]:
        """构建分类树（children 由服务端填充）."""
        return await self._client.request(
            RequestDescriptor(
                url="/categories/tree",
                method="GET",
                params={"type": type} if type else {},
            ),
            list[Category],
        )

    async def get_all_categories(self) -> ApiResponse[list[Category]]:
        """获取所有分类（平铺结构）."""
        return await self._client.request(
            RequestDescriptor(url="/categories", method="GET"),
            list[Category],
        )

    async def batch_delete_categories(self, ids: list[int]) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(url="/categories/batch", method="DELETE", data=list(ids))
        )

    async def update_category_status(
        self, id: int, status: EnableStatus
    ) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(
                url=f"/categories/{id}/status", method="PUT", data={"status": status}
            )
        )

    async def update_category_sort(self, id: int, sort_order: int) -> ApiResponse[None]:
        return await self._client.request(
            RequestDescriptor(
                url=f"/categories/{id}/sort",
                method="PUT",
                data={"sortOrder": sort_order},
            )
        )

    async def move_category_to_parent(
        self, id: int, parent_id: int | None
    ) -> ApiResponse[None]:
        """移动分类到新的父分类下，parent_id 为 None 表示移到根."""
        return await self._client.request(
            RequestDescriptor(
                url=f"/categories/{id}/move",
                method="PUT",
                data={"parentId": parent_id},
            )
        )
