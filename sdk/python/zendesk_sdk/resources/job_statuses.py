"""Job statuses endpoints."""

from typing import Any, Dict, Sequence

from ..job_monitor import JobMonitor
from ..models import ApiResponse, ResourceMeta
from .base import Resource


class JobStatuses(Resource):
    """Client for the Job Statuses API."""

    meta = ResourceMeta(json_api_names=("job_statuses", "job_status"))

    async def list(self) -> ApiResponse:
        return await self._requester.get(["job_statuses"])

    async def show(self, job_status_id: str) -> ApiResponse:
        return await self._requester.get(["job_statuses", job_status_id])

    async def show_many(self, job_status_ids: Sequence[str]) -> ApiResponse:
        if not job_status_ids:
            raise ValueError("Expected job_status_ids to be a non-empty sequence.")
        return await self._requester.get(
            ["job_statuses", "show_many", {"ids": list(job_status_ids)}]
        )

    async def watch(
        self, job_status_id: str, interval: float = 0.5, max_attempts: int = 5
    ) -> Dict[str, Any]:
        """Poll a job until it completes, fails or is killed."""
        return await JobMonitor(self).monitor(job_status_id, interval, max_attempts)

