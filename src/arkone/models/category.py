"""Category 分类模型."""

from typing import Literal

from pydantic import Field

from arkone.models.common import ApiModel

CategoryType = Literal["ARTICLE", "AI_NEWS"]
EnableStatus = Literal["ACTIVE", "INACTIVE"]


class Category(ApiModel):
    """分类（通过 parent_id 构成树）."""

    id: int
    name: str
    description: str | None = None
    type: CategoryType | None = None
    parent_id: int | None = None
    sort_order: int | None = None
    status: EnableStatus | None = None
    create_time: str | None = None
    update_time: str | None = None
    children: list["Category"] | None = Field(
        default=None, description="仅树形查询时填充"
    )


class CategorySaveDTO(ApiModel):
    """创建/更新分类的请求体."""

    name: str
    description: str | None = None
    type: CategoryType
    parent_id: int | None = None
    sort_order: int | None = None
    status: EnableStatus | None = None
