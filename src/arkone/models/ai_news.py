"""AiNews AI 新闻模型."""

from pydantic import Field

from arkone.models.article import ContentStatus
from arkone.models.common import ApiModel, PageQuery


class AiNews(ApiModel):
    """AI 新闻."""

    id: int
    title: str
    content: str | None = None
    summary: str | None = None
    source_url: str | None = Field(default=None, description="原文链接")
    source_name: str | None = Field(default=None, description="来源名称")
    cover_image: str | None = None
    category_id: int | None = None
    category_name: str | None = None
    tags: list[str] | None = Field(default_factory=list)
    status: ContentStatus | None = None
    view_count: int | None = None
    like_count: int | None = None
    comment_count: int | None = None
    is_top: bool | None = None
    is_recommend: bool | None = None
    publish_time: str | None = None
    create_time: str | None = None
    update_time: str | None = None


class AiNewsQuery(PageQuery):
    """AI 新闻分页查询条件."""

    title: str | None = None
    category_id: int | None = None
    status: str | None = None
    source_name: str | None = None
    is_top: bool | None = None
    is_recommend: bool | None = None
    start_time: str | None = None
    end_time: str | None = None


class AiNewsSaveDTO(ApiModel):
    """创建/更新 AI 新闻的请求体."""

    title: str
    content: str
    summary: str
    source_url: str
    source_name: str
    cover_image: str | None = None
    category_id: int
    tags: list[str] = Field(default_factory=list)
    status: ContentStatus = "DRAFT"
    is_top: bool | None = None
    is_recommend: bool | None = None
    publish_time: str | None = None
