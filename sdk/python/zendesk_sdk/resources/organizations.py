"""Organizations endpoints."""

from typing import Any, Dict, List, Sequence, Union

from ..models import ApiResponse, ResourceMeta
from .base import Resource


class Organizations(Resource):
    """Client for the Organizations API."""

    meta = ResourceMeta(json_api_names=("organizations", "organization"))

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["organizations"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", user_id, "organizations"])

    async def count(self) -> ApiResponse:
        return await self._requester.get(["organizations", "count"])

    async def related(self, organization_id: int) -> ApiResponse:
        return await self._requester.get(["organizations", organization_id, "related"])

    async def show(self, organization_id: int) -> ApiResponse:
        return await self._requester.get(["organizations", organization_id])

    async def show_many(self, organization_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(
            ["organizations", "show_many", {"ids": list(organization_ids)}]
        )

    async def create(self, organization: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["organizations"], organization)

    async def create_many(self, organizations: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["organizations", "create_many"], organizations)

    async def create_or_update(self, organization: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["organizations", "create_or_update"], organization)

    upsert = create_or_update

    async def update(self, organization_id: int, organization: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["organizations", organization_id], organization)

    async def update_many(self, organizations: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["organizations", "update_many"], organizations)

    async def delete(self, organization_id: int) -> ApiResponse:
        """Delete an organization; resolves to a ``No Content`` result on success."""
        return await self._requester.delete(["organizations", organization_id])

    async def bulk_delete(self, organization_ids: Sequence[Union[int, str]]) -> ApiResponse:
        """Delete many organizations; returns a job status."""
        return await self._requester.delete(
            ["organizations", "destroy_many", {"ids": list(organization_ids)}]
        )

    async def search(self, external_id: Union[int, str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(
            ["organizations", "search", {"external_id": external_id}]
        )

    async def autocomplete(self, parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["organizations", "autocomplete", parameters])

    async def incremental(self, start_time: Union[int, str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(
            ["incremental", "organizations", {"start_time": start_time}]
        )
