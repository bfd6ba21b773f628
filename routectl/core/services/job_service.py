"""Drives asynchronous backend jobs to a terminal state."""

import logging

from routectl.domain.errors import APIError
from routectl.domain.interfaces.platform_client import PlatformClient
from routectl.domain.models.common import JobURL
from routectl.domain.models.warnings import Warnings

logger = logging.getLogger(__name__)


class JobService:
    """Polls jobs through the platform client.

    Timeout, cancellation and backoff are the client's business; whatever it
    raises reaches the caller unchanged.
    """

    def __init__(self, client: PlatformClient):
        self.client = client

    async def poll(self, job_url: JobURL, warnings: Warnings) -> None:
        """Suspends until the job finishes.

        Raises:
            JobFailedError: If the job ended in a failed state.
        """
        logger.debug(f"Polling job {job_url}")
        try:
            poll_warnings = await self.client.poll_job(job_url)
        except APIError as e:
            warnings.extend(e.warnings)
            logger.info(f"Job {job_url} did not complete: {e}")
            raise
        warnings.extend(poll_warnings)
        logger.debug(f"Job {job_url} complete")
