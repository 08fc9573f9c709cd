"""Attachments and uploads endpoints."""

from typing import Any, Dict, Optional

from ..models import ApiResponse, ResourceMeta
from .base import Resource


class Attachments(Resource):
    """Client for the Attachments API."""

    meta = ResourceMeta(json_api_names=("attachment", "upload"))

    async def upload(
        self,
        file: Any,
        filename: str,
        token: Optional[str] = None,
        binary: Optional[bool] = None,
    ) -> Any:
        """Upload a file; pass ``token`` to add it to an existing upload.

        ``file`` may be a path, raw bytes or a binary file object.
        """
        options: Dict[str, Any] = {"filename": filename}
        if binary is not None:
            options["binary"] = binary
        if token:
            options["token"] = token
        return await self._requester.request_upload(["uploads", options], file)

    async def delete_upload(self, token: str) -> ApiResponse:
        return await self._requester.delete(["uploads", token])

    async def show(self, attachment_id: int) -> ApiResponse:
        return await self._requester.get(["attachments", attachment_id])

    async def redact_comment_attachment(
        self, ticket_id: int, comment_id: int, attachment_id: int
    ) -> ApiResponse:
        return await self._requester.put(
            ["tickets", ticket_id, "comments", comment_id, "attachments", attachment_id, "redact"],
            {},
        )
