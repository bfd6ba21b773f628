import asyncio

import pytest
from unittest.mock import MagicMock

from routectl.core.services.job_service import JobService
from routectl.domain.errors import JobFailedError
from routectl.domain.models.warnings import Warnings

JOB_URL = "https://api.example.com/v3/jobs/some-job"


@pytest.fixture
def job_service(mock_client: MagicMock):
    return JobService(mock_client)


@pytest.mark.asyncio
async def test_poll_collects_warnings(job_service: JobService, mock_client: MagicMock):
    mock_client.poll_job.return_value = ["still-working", "done-with-notes"]
    warnings = Warnings(["earlier"])

    await job_service.poll(JOB_URL, warnings)

    mock_client.poll_job.assert_awaited_once_with(JOB_URL)
    assert warnings == ["earlier", "still-working", "done-with-notes"]


@pytest.mark.asyncio
async def test_poll_failed_job(job_service: JobService, mock_client: MagicMock):
    mock_client.poll_job.side_effect = JobFailedError(JOB_URL, "boom", warnings=["job-warning"])
    warnings = Warnings()

    with pytest.raises(JobFailedError, match="boom"):
        await job_service.poll(JOB_URL, warnings)

    assert warnings == ["job-warning"]


@pytest.mark.asyncio
async def test_poll_cancellation_is_not_wrapped(job_service: JobService, mock_client: MagicMock):
    mock_client.poll_job.side_effect = asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await job_service.poll(JOB_URL, Warnings())
