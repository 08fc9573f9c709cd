"""Polling of asynchronous Zendesk jobs."""

import asyncio
import logging
from typing import Any, Dict

from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = frozenset({"completed", "failed", "killed"})


class JobMonitor:
    """Waits for a background job (bulk import, bulk delete...) to finish.

    ``job_statuses`` is anything with an async ``show(job_id)`` returning an
    :class:`~zendesk_sdk.models.ApiResponse`, normally the client's
    ``job_statuses`` resource.
    """

    def __init__(self, job_statuses: Any) -> None:
        self.job_statuses = job_statuses

    async def check_job_status(self, job_id: str) -> Dict[str, Any]:
        response = await self.job_statuses.show(job_id)
        result = response.result
        if isinstance(result, dict) and "job_status" in result:
            return result["job_status"]
        return result

    async def monitor(
        self, job_id: str, interval: float = 0.5, max_attempts: int = 5
    ) -> Dict[str, Any]:
        """Poll every ``interval`` seconds until the job reaches a terminal status.

        A job that is not visible yet (404) is retried up to ``max_attempts``
        times; every other error propagates.
        """
        attempts = 0
        while True:
            await asyncio.sleep(interval)
            try:
                job_status = await self.check_job_status(job_id)
            except NotFoundError:
                if attempts >= max_attempts:
                    raise
                attempts += 1
                logger.debug("Waiting for job %s to become available (attempt %d)", job_id, attempts)
                continue

            status = job_status.get("status")
            if status in TERMINAL_STATUSES:
                logger.debug("Job %s %s", job_id, status)
                return job_status

            logger.debug(
                "[%s] Job %s progress: %s out of %s",
                job_status.get("message") or "pending",
                job_id,
                job_status.get("progress") or 0,
                job_status.get("total"),
            )
