"""Users endpoints."""

from typing import Any, Dict, List, Sequence, Union

from ..models import ApiResponse, ResourceMeta, SideLoadRule
from .base import Resource


class Users(Resource):
    """Client for the Users API."""

    meta = ResourceMeta(
        json_api_names=("users", "user"),
        side_load_map=(
            SideLoadRule(field="id", name="group", dataset="groups", all=True),
            SideLoadRule(
                field="id", name="identity", dataset="identities", array=True, data_key="user_id"
            ),
            SideLoadRule(field="custom_role_id", name="role", dataset="roles"),
            SideLoadRule(field="organization_id", name="organization", dataset="organizations"),
        ),
    )

    async def me(self) -> ApiResponse:
        return await self._requester.get(["users", "me"])

    auth = me

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users"])

    async def list_with_filter(self, filter_type: str, value: Any) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", {filter_type: value}])

    async def list_by_group(self, group_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["groups", group_id, "users"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["organizations", organization_id, "users"])

    async def show(self, user_id: int) -> ApiResponse:
        return await self._requester.get(["users", user_id])

    async def show_many(self, user_ids: Sequence[int]) -> ApiResponse:
        return await self._requester.get(["users", "show_many", {"ids": list(user_ids)}])

    async def create(self, user: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["users"], user)

    async def create_many(self, users: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["users", "create_many"], users)

    async def create_or_update(self, user: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["users", "create_or_update"], user)

    async def update(self, user_id: int, user: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["users", user_id], user)

    async def update_many(self, users: Dict[str, Any], ids: Sequence[int] = ()) -> ApiResponse:
        """Bulk update; with ``ids`` the same change is applied to each of them."""
        uri: List[Any] = ["users", "update_many"]
        if ids:
            uri.append("?ids=" + ",".join(str(user_id) for user_id in ids))
        return await self._requester.put(uri, users)

    async def suspend(self, user_id: int) -> ApiResponse:
        return await self._requester.put(["users", user_id], {"user": {"suspended": True}})

    async def unsuspend(self, user_id: int) -> ApiResponse:
        return await self._requester.put(["users", user_id], {"user": {"suspended": False}})

    async def delete(self, user_id: int) -> ApiResponse:
        return await self._requester.delete(["users", user_id])

    async def destroy_many(self, user_ids: Sequence[int]) -> ApiResponse:
        return await self._requester.delete(
            ["users", "destroy_many", "?ids=" + ",".join(str(user_id) for user_id in user_ids)]
        )

    async def search(self, parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", "search", parameters])

    async def merge(self, user_id: int, target_id: int) -> ApiResponse:
        return await self._requester.put(["users", user_id, "merge"], {"user": {"id": target_id}})

    async def incremental(self, start_time: Union[int, str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["incremental", "users", {"start_time": start_time}])

    async def incremental_include(
        self, start_time: Union[int, str], include: str
    ) -> List[Dict[str, Any]]:
        return await self._requester.get_all(
            ["incremental", "users", {"start_time": start_time, "include": include}]
        )

    async def list_tags(self, user_id: int) -> List[Any]:
        return await self._requester.get_all(["users", user_id, "tags"])
