"""
State machine that tracks a single analysis job from upload to a terminal state.

Only one job is tracked at a time: submitting again or resetting discards the
current job together with its poll timer, and closing the poller fails a job
that has not finished yet. Ticks that land after their job was discarded are
ignored.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol

from finanalyzer.clients.analysis_api import (
    AnalysisServiceError,
    ProtocolError,
    RemoteAnalysisError,
    TransportError,
)
from finanalyzer.schemas import AnalysisResult, JobHandle, JobStatusSnapshot, SelectedInput
from finanalyzer.services.polling import PollTimer

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Analysis failed"
CLOSED_MESSAGE = "Analysis tracking was closed before the job finished"


class JobStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


class JobClient(Protocol):
    async def submit(self, document: SelectedInput) -> JobHandle: ...

    async def fetch_status(self, analysis_id: str) -> JobStatusSnapshot: ...


@dataclass(slots=True)
class AnalysisJob:
    """Lifecycle record of one server-side analysis task."""

    status: JobStatus = JobStatus.IDLE
    id: Optional[str] = None
    result: Optional[AnalysisResult] = None
    error: Optional[AnalysisServiceError] = None
    _done: asyncio.Event = field(default_factory=asyncio.Event, repr=False)

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    async def wait(self) -> None:
        await self._done.wait()

    def start_processing(self, analysis_id: str) -> None:
        if self.id is not None:
            raise RuntimeError("Job id is assigned once per job")
        self.id = analysis_id
        self.status = JobStatus.PROCESSING

    def complete(self, result: AnalysisResult) -> None:
        self.result = result
        self.error = None
        self.status = JobStatus.COMPLETED
        self._done.set()

    def fail(self, error: AnalysisServiceError) -> None:
        self.result = None
        self.error = error
        self.status = JobStatus.FAILED
        self._done.set()


class JobPoller:
    """Drive one analysis job through submit, poll and terminal states."""

    def __init__(
        self,
        client: JobClient,
        *,
        poll_interval_seconds: float = 2.0,
        on_change: Callable[[AnalysisJob], None] | None = None,
    ) -> None:
        self._client = client
        self._interval = poll_interval_seconds
        self._on_change = on_change
        self._job = AnalysisJob()
        self._timer: PollTimer | None = None

    @property
    def job(self) -> AnalysisJob:
        return self._job

    @property
    def status(self) -> JobStatus:
        return self._job.status

    @property
    def polling(self) -> bool:
        return self._timer is not None and self._timer.active

    async def submit(self, document: SelectedInput) -> AnalysisJob:
        """Start a brand-new job for ``document``, discarding any previous one."""
        self._stop_timer()
        job = AnalysisJob(status=JobStatus.SUBMITTING)
        self._job = job
        self._notify(job)

        try:
            handle = await self._client.submit(document)
        except Exception as exc:
            if not self._awaiting_upload(job):
                return job
            error = exc if isinstance(exc, AnalysisServiceError) else TransportError(str(exc))
            logger.warning("Document upload failed: %s", error)
            job.fail(error)
            self._notify(job)
            return job

        if not self._awaiting_upload(job):
            # Reset, resubmitted or closed while the upload was in flight.
            return job

        job.start_processing(handle.analysis_id)
        logger.info("Analysis job accepted", extra={"job_id": job.id})
        self._notify(job)
        self._timer = PollTimer(self._interval, lambda: self._tick(job))
        self._timer.start()
        return job

    def reset(self) -> None:
        """Return to idle, cancelling any pending tick."""
        self._stop_timer()
        self._job = AnalysisJob()
        self._notify(self._job)

    def close(self) -> None:
        """Release the timer. An unfinished job fails so waiters are woken."""
        self._stop_timer()
        job = self._job
        if job.status in (JobStatus.SUBMITTING, JobStatus.PROCESSING):
            job.fail(AnalysisServiceError(CLOSED_MESSAGE))
            logger.info("Analysis tracking closed", extra={"job_id": job.id})
            self._notify(job)

    async def wait_for_terminal(self, timeout: float | None = None) -> AnalysisJob:
        """Block until the current job completes or fails."""
        job = self._job
        if job.status is JobStatus.IDLE:
            raise RuntimeError("No analysis job has been submitted")
        await asyncio.wait_for(job.wait(), timeout)
        return job

    async def wait_for_result(self, timeout: float | None = None) -> AnalysisResult:
        """Return the current job's result, raising its error if it failed."""
        job = await self.wait_for_terminal(timeout)
        if job.error is not None:
            raise job.error
        if job.result is None:
            raise RuntimeError("Completed analysis job has no result")
        return job.result

    async def __aenter__(self) -> JobPoller:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    async def _tick(self, job: AnalysisJob) -> None:
        analysis_id = job.id
        if job is not self._job or job.status is not JobStatus.PROCESSING or analysis_id is None:
            return

        try:
            snapshot = await self._client.fetch_status(analysis_id)
        except (TransportError, ProtocolError) as exc:
            logger.warning(
                "Polling error, retrying on next tick: %s",
                exc,
                extra={"job_id": job.id},
            )
            return

        if job is not self._job or job.status is not JobStatus.PROCESSING:
            logger.debug("Discarding stale status response", extra={"job_id": job.id})
            return

        if snapshot.status == JobStatus.COMPLETED.value:
            self._stop_timer()
            job.complete(snapshot.result or AnalysisResult())
            logger.info("Analysis job completed", extra={"job_id": job.id})
            self._notify(job)
        elif snapshot.status == JobStatus.FAILED.value:
            self._stop_timer()
            job.fail(RemoteAnalysisError(snapshot.error_message or DEFAULT_FAILURE_MESSAGE))
            logger.info(
                "Analysis job failed: %s",
                job.error_message,
                extra={"job_id": job.id},
            )
            self._notify(job)

    def _awaiting_upload(self, job: AnalysisJob) -> bool:
        return job is self._job and job.status is JobStatus.SUBMITTING

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self, job: AnalysisJob) -> None:
        if self._on_change is not None:
            self._on_change(job)


__all__ = [
    "CLOSED_MESSAGE",
    "DEFAULT_FAILURE_MESSAGE",
    "AnalysisJob",
    "JobClient",
    "JobPoller",
    "JobStatus",
]
