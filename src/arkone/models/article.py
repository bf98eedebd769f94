"""Article 文章模型."""

from typing import Literal

from pydantic import Field

from arkone.models.common import ApiModel, PageQuery

ContentStatus = Literal["DRAFT", "PUBLISHED", "ARCHIVED"]


class Article(ApiModel):
    """文章（服务端字段均可能为 null）."""

    id: int
    title: str
    content: str | None = None
    summary: str | None = None
    cover_image: str | None = None
    category_id: int | None = None
    category_name: str | None = None
    tags: list[str] | None = Field(default_factory=list, description="标签名称（非 ID），保持顺序")
    status: ContentStatus | None = None
    view_count: int | None = None
    like_count: int | None = None
    comment_count: int | None = None
    is_top: bool | None = None
    is_recommend: bool | None = None
    publish_time: str | None = None
    create_time: str | None = None
    update_time: str | None = None


class ArticleQuery(PageQuery):
    """文章分页查询条件."""

    title: str | None = None
    category_id: int | None = None
    status: str | None = None
    is_top: bool | None = None
    is_recommend: bool | None = None
    start_time: str | None = None
    end_time: str | None = None


class ArticleSaveDTO(ApiModel):
    """创建/更新文章的请求体（不含 id、计数、时间戳等服务端字段）."""

    title: str
    content: str
    summary: str
    cover_image: str | None = None
    category_id: int
    tags: list[str] = Field(default_factory=list)
    status: ContentStatus = "DRAFT"
    is_top: bool | None = None
    is_recommend: bool | None = None
    publish_time: str | None = None
