"""测试分类 API."""

from conftest import RecordingBackend

from arkone.client import ArkOneClient
from arkone.models.category import Category, CategorySaveDTO


def category_payload(**overrides):
    payload = {
        "id": 1,
        "name": "技术",
        "type": "ARTICLE",
        "parentId": None,
        "sortOrder": 0,
        "status": "ACTIVE",
        "createTime": "2024-01-01 09:00:00",
        "updateTime": "2024-01-01 09:00:00",
    }
    payload.update(overrides)
    return payload


class TestCategoryQueries:
    """测试分类查询."""

    async def test_by_type(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        backend.reply([category_payload()])
        response = await arkone.categories.get_categories_by_type("AI_NEWS")
        assert backend.last.url.path == "/api/categories/type"
        assert dict(backend.last.url.params) == {"type": "AI_NEWS"}
        assert isinstance(response.data[0], Category)

    async def test_enabled_and_all(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        backend.reply([])
        await arkone.categories.get_all_enabled_categories()
        assert backend.last.url.path == "/api/categories/enabled"

        await arkone.categories.get_all_categories()
        assert backend.last.url.path == "/api/categories"
        assert backend.last.method == "GET"

    async def test_children(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        backend.reply([category_payload(id=2, parentId=1)])
        response = await arkone.categories.get_categories_by_parent_id(1)
        assert backend.last.url.path == "/api/categories/children"
        assert dict(backend.last.url.params) == {"parentId": "1"}
        assert response.data[0].parent_id == 1

    async def test_get_by_id(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        backend.reply(category_payload(id=42))
        response = await arkone.categories.get_category_by_id(42)
        assert backend.last.url.path == "/api/categories/42"
        assert response.data.id == 42

    async def test_tree_with_children(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        """树形查询返回嵌套的 children."""
        backend.reply(
            [
                category_payload(
                    children=[category_payload(id=2, parentId=1, name="AI")]
                )
            ]
        )
        response = await arkone.categories.build_category_tree("ARTICLE")
        assert backend.last.url.path == "/api/categories/tree"
        assert dict(backend.last.url.params) == {"type": "ARTICLE"}
        root = response.data[0]
        assert root.children is not None
        assert root.children[0].name == "AI"

    async def test_tree_without_type(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        backend.reply([])
        await arkone.categories.build_category_tree()
        assert dict(backend.last.url.params) == {}

    async def test_name_exists(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        """检查名称：exclude_id 为空时不发送."""
        backend.reply(True)
        response = await arkone.categories.check_category_name_exists("技术")
        assert backend.last.url.path == "/api/categories/exists"
        assert dict(backend.last.url.params) == {"name": "技术"}
        assert response.data is True

        backend.reply(False)
        response = await arkone.categories.check_category_name_exists("技术", exclude_id=5)
        assert dict(backend.last.url.params) == {"name": "技术", "excludeId": "5"}
        assert response.data is False

    async def test_content_count(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        backend.reply(12)
        response = await arkone.categories.get_category_content_count(42)
        assert backend.last.url.path == "/api/categories/42/count"
        assert response.data == 12


class TestCategoryMutations:
    """测试分类写操作."""

    async def test_create(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        backend.reply(category_payload(id=3))
        await arkone.categories.create_category(
            CategorySaveDTO(name="AI", type="AI_NEWS", parent_id=1)
        )
        assert backend.last.method == "POST"
        assert backend.last_json() == {"name": "AI", "type": "AI_NEWS", "parentId": 1}

    async def test_update(self, arkone: ArkOneClient, backend: RecordingBackend) -> None:
        backend.reply(category_payload(id=3))
        await arkone.categories.update_category(
            3, CategorySaveDTO(name="AI", type="ARTICLE", sort_order=2, status="INACTIVE")
        )
        assert backend.last.method == "PUT"
        assert backend.last.url.path == "/api/categories/3"
        assert backend.last_json()["sortOrder"] == 2

    async def test_delete_and_batch(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        await arkone.categories.delete_category(42)
        assert backend.last.method == "DELETE"
        assert backend.last.url.path == "/api/categories/42"

        await arkone.categories.batch_delete_categories([1, 2, 3])
        assert backend.last.url.path == "/api/categories/batch"
        assert backend.last_json() == [1, 2, 3]

    async def test_status_and_sort(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        await arkone.categories.update_category_status(42, "INACTIVE")
        assert backend.last.method == "PUT"
        assert backend.last.url.path == "/api/categories/42/status"
        assert backend.last_json() == {"status": "INACTIVE"}

        await arkone.categories.update_category_sort(42, 7)
        assert backend.last.url.path == "/api/categories/42/sort"
        assert backend.last_json() == {"sortOrder": 7}

    async def test_move_to_parent(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        await arkone.categories.move_category_to_parent(42, 3)
        assert backend.last.url.path == "/api/categories/42/move"
        assert backend.last_json() == {"parentId": 3}

    async def test_move_to_root_sends_null(
        self, arkone: ArkOneClient, backend: RecordingBackend
    ) -> None:
        """parent_id 为 None 时发送 JSON null（移到根）."""
        await arkone.categories.move_category_to_parent(42, None)
        assert backend.last_json() == {"parentId": None}
