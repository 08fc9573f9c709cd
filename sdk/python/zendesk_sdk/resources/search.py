"""Search endpoints."""

from typing import Any, Dict, List

from ..models import ApiResponse, ResourceMeta
from .base import Resource


class Search(Resource):
    """Client for the Search API."""

    meta = ResourceMeta(json_api_names=("results",))

    async def query(self, search_term: str) -> ApiResponse:
        return await self._requester.get(["search", {"query": search_term}])

    async def query_all(self, search_term: str) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["search", {"query": search_term}])

    async def query_anonymous(self, search_term: str) -> ApiResponse:
        return await self._requester.get(["portal", "search", {"query": search_term}])

    async def show_results_count(self, search_term: str) -> ApiResponse:
        return await self._requester.get(["search", "count", {"query": search_term}])

    async def export_results(
        self, search_term: str, object_type: str, page_size: int = 100
    ) -> List[Dict[str, Any]]:
        return await self._requester.get_all(
            [
                "search",
                "export",
                {"query": search_term, "filter": {"type": object_type}, "page": {"size": page_size}},
            ]
        )
