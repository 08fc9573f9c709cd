"""Incremental ticket export endpoints."""

from typing import Any, Dict, List, Optional, Union

from ..models import ApiResponse, ResourceMeta
from .base import Resource

StartTime = Union[int, str]


class TicketExport(Resource):
    """Client for the incremental ticket export API."""

    meta = ResourceMeta(json_api_names=("tickets", "exports", "export", "audits"))

    async def export(self, start_time: StartTime) -> ApiResponse:
        return await self._requester.get(["incremental", "tickets", f"?start_time={start_time}"])

    async def export_all(
        self, start_time: StartTime, include: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Every ticket changed since ``start_time``, across all export pages."""
        query: Dict[str, Any] = {"start_time": start_time}
        if include:
            query["include"] = include
        return await self._requester.get_all(["incremental", "tickets", query])

    async def export_cursor(self, start_time: StartTime, cursor: Optional[str] = None) -> ApiResponse:
        query: Dict[str, Any] = {"start_time": start_time}
        if cursor:
            query["cursor"] = cursor
        return await self._requester.get(["incremental", "tickets", "cursor", query])

    async def export_audit(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._requester.get_all(["tickets", ticket_id, "audits"])

    async def sample(self, start_time: StartTime) -> ApiResponse:
        return await self._requester.get(["exports", "tickets", "sample", {"start_time": start_time}])
