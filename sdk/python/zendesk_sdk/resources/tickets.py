"""Tickets endpoints."""

from typing import Any, Dict, List, Sequence, Union

from ..models import ApiResponse, ResourceMeta, SideLoadRule
from .base import Resource


class Tickets(Resource):
    """Client for the Tickets API.

    Side-loading ``users`` and ``organizations`` attaches ``assignee``,
    ``requester``, ``submitter`` and ``organization`` to each ticket.
    """

    meta = ResourceMeta(
        json_api_names=("tickets", "ticket", "audits", "comments"),
        side_load_map=(
            SideLoadRule(field="assignee_id", name="assignee", dataset="users"),
            SideLoadRule(field="requester_id", name="requester", dataset="users"),
            SideLoadRule(field="submitter_id", name="submitter", dataset="users"),
            SideLoadRule(field="organization_id", name="organization", dataset="organizations"),
            SideLoadRule(field="id", name="sharing_agreements", dataset="sharing_agreements"),
        ),
    )

    async def list(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets"])

    async def list_assigned(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", user_id, "tickets", "assigned"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["organizations", organization_id, "tickets"])

    async def list_by_user_requested(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["users", user_id, "tickets", "requested"])

    async def list_with_filter(self, filter_type: str, value: Any) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", {filter_type: value}])

    async def list_recent(self) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", "recent"])

    async def list_collaborators(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", ticket_id, "collaborators"])

    async def list_audits(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", ticket_id, "audits"])

    async def list_comments(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", ticket_id, "comments"])

    async def show(self, ticket_id: int) -> ApiResponse:
        return await self._requester.get(["tickets", ticket_id])

    async def show_many(self, ticket_ids: Sequence[int]) -> ApiResponse:
        return await self._requester.get(["tickets", "show_many", {"ids": list(ticket_ids)}])

    async def create(self, ticket: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["tickets"], ticket)

    async def create_many(self, tickets: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["tickets", "create_many"], tickets)

    async def update(self, ticket_id: int, ticket: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["tickets", ticket_id], ticket)

    async def update_many(self, tickets: Dict[str, Any]) -> ApiResponse:
        return await self._requester.put(["tickets", "update_many"], tickets)

    async def delete(self, ticket_id: int) -> ApiResponse:
        return await self._requester.delete(["tickets", ticket_id])

    async def delete_many(self, ticket_ids: Sequence[int]) -> ApiResponse:
        return await self._requester.delete(["tickets", "destroy_many", {"ids": list(ticket_ids)}])

    async def merge(self, ticket_id: int, merged: Dict[str, Any]) -> ApiResponse:
        return await self._requester.post(["tickets", ticket_id, "merge"], merged)

    async def incremental(self, start_time: Union[int, str]) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["incremental", "tickets", {"start_time": start_time}])

    async def add_tags(self, ticket_id: int, tags: Sequence[str]) -> ApiResponse:
        return await self._requester.put(["tickets", ticket_id, "tags"], {"tags": list(tags)})
