"""资源接口."""

from arkone.api.ai_news import AiNewsApi
from arkone.api.articles import ArticleApi
from arkone.api.categories import CategoryApi
from arkone.api.tags import TagApi

__all__ = [
    "AiNewsApi",
    "ArticleApi",
    "CategoryApi",
    "TagApi",
]
