"""Help Center articles endpoints."""

from typing import Any, Dict, List, Sequence, Union

from ..models import ApiResponse, ApiType, ResourceMeta, SideLoadRule
from .base import Resource


class Articles(Resource):
    """Client for the Help Center Articles API."""

    meta = ResourceMeta(
        api_type=ApiType.HELPCENTER,
        json_api_names=("articles", "article"),
        side_load_map=(
            SideLoadRule(field="author_id", name="user", dataset="users"),
            SideLoadRule(field="section_id", name="section", dataset="sections"),
            SideLoadRule(field="category_id", name="category", dataset="categories"),
        ),
    )

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["articles"])

    async def list_by_locale(self, locale: str) -> List[Dict[str, Any]]:
        return await self._requester.get_all([locale, "articles"])

    async def list_by_section(self, section_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["sections", section_id, "articles"])

    async def list_by_category(self, category_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["categories", category_id, "articles"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", user_id, "articles"])

    async def list_since_start_time(self, start_time: Union[int, str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["incremental", "articles", {"start_time": start_time}])

    async def list_by_label_names(self, label_names: Sequence[str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["articles", {"label_names": list(label_names)}])

    async def show(self, article_id: int) -> ApiResponse:
        return await self._requester.get(["articles", article_id])

    async def create(self, section_id: int, article: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["sections", section_id, "articles"], article)

    async def update(self, article_id: int, article: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["articles", article_id], article)

    async def delete(self, article_id: int) -> ApiResponse:
        return await self._requester.delete(["articles", article_id])
