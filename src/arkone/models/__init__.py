"""数据模型."""

from arkone.models.ai_news import AiNews, AiNewsQuery, AiNewsSaveDTO
from arkone.models.article import Article, ArticleQuery, ArticleSaveDTO, ContentStatus
from arkone.models.category import (
    Category,
    CategorySaveDTO,
    CategoryType,
    EnableStatus,
)
from arkone.models.common import ApiModel, ApiResponse, PageQuery, PageResponse
from arkone.models.tag import (
    Tag,
    TagCloudItem,
    TagQuery,
    TagSaveDTO,
    TagStats,
    TagType,
)

__all__ = [
    "AiNews",
    "AiNewsQuery",
    "AiNewsSaveDTO",
    "ApiModel",
    "ApiResponse",
    "Article",
    "ArticleQuery",
    "ArticleSaveDTO",
    "Category",
    "CategorySaveDTO",
    "CategoryType",
    "ContentStatus",
    "EnableStatus",
    "PageQuery",
    "PageResponse",
    "Tag",
    "TagCloudItem",
    "TagQuery",
    "TagSaveDTO",
    "TagStats",
    "TagType",
]
