"""Groups and group memberships endpoints."""

from typing import Any, Dict, List, Sequence

from ..models import ApiResponse, ResourceMeta, SideLoadRule
from .base import Resource


class Groups(Resource):
    """Client for the Groups API."""

    meta = ResourceMeta(
        json_api_names=("groups", "group"),
        side_load_map=(SideLoadRule(field="user_id", name="users", dataset="users", all=True),),
    )

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["groups"])

    async def assignable(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["groups", "assignable"])

    async def count(self) -> ApiResponse:
        return await self._requester.get(["groups", "count"])

    async def show(self, group_id: int) -> ApiResponse:
        return await self._requester.get(["groups", group_id])

    async def create(self, group: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["groups"], group)

    async def update(self, group_id: int, group: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["groups", group_id], group)

    async def delete(self, group_id: int) -> ApiResponse:
        return await self._requester.delete(["groups", group_id])


class GroupMemberships(Resource):
    """Client for the Group Memberships API."""

    meta = ResourceMeta(
        json_api_names=("group_memberships", "group_membership"),
        side_load_map=(
            SideLoadRule(field="group_id", name="groups", dataset="groups"),
            SideLoadRule(field="user_id", name="user", dataset="users"),
        ),
    )

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["group_memberships"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", user_id, "group_memberships"])

    async def list_by_group(self, group_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["groups", group_id, "memberships"])

    async def list_assignable(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["group_memberships", "assignable"])

    async def show(self, membership_id: int) -> ApiResponse:
        return await self._requester.get(["group_memberships", membership_id])

    async def create(self, membership: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["group_memberships"], membership)

    async def delete(self, membership_id: int) -> ApiResponse:
        return await self._requester.delete(["group_memberships", membership_id])

    async def make_default(self, user_id: int, membership_id: int) -> ApiResponse:
        return await self._requester.put(
            ["users", user_id, "group_memberships", membership_id, "make_default"]
        )

    async def bulk_create(self, memberships: Sequence[Dict[str, Any]]) -> ApiResponse:
        return await self._requester.post(
            ["group_memberships", "create_many"], {"group_memberships": list(memberships)}
        )

    async def bulk_delete(self, membership_ids: Sequence[int]) -> ApiResponse:
        return await self._requester.delete(
            ["group_memberships", "destroy_many", {"ids": list(membership_ids)}]
        )
