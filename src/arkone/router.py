"""前端路由表."""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from starlette.routing import compile_path

logger = logging.getLogger(__name__)

_PARAM_PATTERN = re.compile(r":(\w+)")


class RouteNotFound(LookupError):
    """按名称反查路由失败."""


class RouteParamsError(ValueError):
    """生成路径时参数与路由定义不一致."""


@dataclass(frozen=True)
class RouteRecord:
    """路径 → 视图绑定."""

    path: str
    name: str
    view: str
    lazy: bool = True


@dataclass(frozen=True)
class RouteMatch:
    """路由匹配结果，params 为原始字符串（由视图自行解析为数字 ID）."""

    record: RouteRecord
    params: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.record.name


ROUTES: tuple[RouteRecord, ...] = (
    RouteRecord(path="/", name="home", view="HomeView", lazy=False),
    RouteRecord(path="/articles", name="articles", view="ArticleListView"),
    RouteRecord(path="/articles/:id", name="article-detail", view="ArticleDetailView"),
    RouteRecord(path="/ai-news", name="ai-news", view="AiNewsListView"),
    RouteRecord(path="/ai-news/:id", name="ai-news-detail", view="AiNewsDetailView"),
    RouteRecord(path="/about", name="about", view="AboutView"),
)


def _identity(view: str) -> Any:
    return view


class Router:
    """
    静态路由表.

    eager 视图在创建时加载，lazy 视图在首次 load_component() 时才通过 loader 加载。
    """

    def __init__(
        self,
        routes: Iterable[RouteRecord] = ROUTES,
        loader: Callable[[str], Any] | None = None,
    ) -> None:
        self.routes = tuple(routes)
        self._loader = loader or _identity
        self._compiled: list[tuple[RouteRecord, re.Pattern[str], str]] = []
        for record in self.routes:
            # ":id" 语法转为 starlette 的 "{id}"
            path_regex, path_format, _ = compile_path(
                _PARAM_PATTERN.sub(r"{\1}", record.path)
            )
            self._compiled.append((record, path_regex, path_format))

        self._components: dict[str, Any] = {
            record.name: self._loader(record.view)
            for record in self.routes
            if not record.lazy
        }

    def resolve(self, path: str) -> RouteMatch | None:
        """解析路径，未定义的路径返回 None."""
        if len(path) > 1:
            path = path.rstrip("/")
        for record, path_regex, _ in self._compiled:
            match = path_regex.match(path)
            if match:
                return RouteMatch(record=record, params=match.groupdict())
        logger.debug(f"未匹配的路径: {path}")
        return None

    def url_for(self, name: str, **params: Any) -> str:
        """根据路由名称和参数生成路径."""
        for record, _, path_format in self._compiled:
            if record.name != name:
                continue
            expected = set(_PARAM_PATTERN.findall(record.path))
            if expected != set(params):
                msg = f"路由 {name} 需要参数 {sorted(expected)}，实际为 {sorted(params)}"
                raise RouteParamsError(msg)
            return path_format.format(
                **{k: quote(str(v), safe="") for k, v in params.items()}
            )
        msg = f"路由不存在: {name}"
        raise RouteNotFound(msg)

    def load_component(self, match: RouteMatch | RouteRecord) -> Any:
        """加载路由对应的视图（lazy 视图只加载一次）."""
        record = match.record if isinstance(match, RouteMatch) else match
        if record.name not in self._components:
            self._components[record.name] = self._loader(record.view)
        return self._components[record.name]

    def is_loaded(self, name: str) -> bool:
        return name in self._components


def create_router(loader: Callable[[str], Any] | None = None) -> Router:
    """创建默认路由."""
    return Router(ROUTES, loader=loader)
