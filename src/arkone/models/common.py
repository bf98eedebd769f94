"""通用响应与分页模型."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """所有接口模型的基类：字段使用 snake_case，线上格式为 camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict:
        """转换为请求参数/请求体（省略未设置的字段）."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ApiResponse(ApiModel, Generic[T]):
    """统一响应结构."""

    code: int
    message: str = ""
    data: T | None = None
    timestamp: int | None = None


class PageResponse(ApiModel, Generic[T]):
    """分页响应."""

    records: list[T] = []
    total: int = 0
    size: int = 0
    current: int = 0
    pages: int = 0


class PageQuery(ApiModel):
    """分页查询参数."""

    current: int | None = None
    size: int | None = None
