"""Tag 标签模型."""

from typing import Literal

from arkone.models.category import EnableStatus
from arkone.models.common import ApiModel, PageQuery

TagType = Literal["ARTICLE", "AI_NEWS", "COMMON"]


class Tag(ApiModel):
    """标签."""

    id: int
    name: str
    description: str | None = None
    type: TagType | None = None
    color: str | None = None
    usage_count: int | None = None
    sort_order: int | None = None
    status: EnableStatus | None = None
    create_time: str | None = None
    update_time: str | None = None


class TagQuery(PageQuery):
    """标签分页查询条件."""

    name: str | None = None
    type: str | None = None
    status: str | None = None


class TagSaveDTO(ApiModel):
    """创建/更新标签的请求体."""

    name: str
    description: str | None = None
    type: TagType = "COMMON"
    color: str | None = None
    sort_order: int | None = None
    status: EnableStatus | None = None


class TagStats(ApiModel):
    """标签统计信息."""

    total_tags: int | None = None
    active_tags: int | None = None
    total_usage: int | None = None
    average_usage: float | None = None


class TagCloudItem(ApiModel):
    """标签云条目."""

    name: str
    value: int | None = None
    color: str | None = None
