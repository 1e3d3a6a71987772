"""
Top-level state holder for the analyzer screen.

Switches between collecting a document and reviewing results based on the
poller's job status. The only way back to collecting after a completed job is
``reset``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from finanalyzer.schemas import SelectedInput
from finanalyzer.services.job_poller import AnalysisJob, JobClient, JobPoller, JobStatus
from finanalyzer.services.result_view import ResultView, build_result_view

logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    JobStatus.SUBMITTING: "Uploading...",
    JobStatus.PROCESSING: "Analyzing document...",
}


class ViewMode(str, Enum):
    COLLECTING = "collecting"
    REVIEWING = "reviewing"


class ViewController:
    """Own the selected document and the presentation mode."""

    def __init__(self, client: JobClient, *, poll_interval_seconds: float = 2.0) -> None:
        self._poller = JobPoller(
            client,
            poll_interval_seconds=poll_interval_seconds,
            on_change=self._handle_job_change,
        )
        self._mode = ViewMode.COLLECTING
        self._selected: Optional[SelectedInput] = None
        self._error_message: Optional[str] = None
        self._result_view: Optional[ResultView] = None

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def poller(self) -> JobPoller:
        return self._poller

    @property
    def job(self) -> AnalysisJob:
        return self._poller.job

    @property
    def selected_input(self) -> Optional[SelectedInput]:
        return self._selected

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def status_message(self) -> Optional[str]:
        return _STATUS_MESSAGES.get(self._poller.status)

    @property
    def result_view(self) -> Optional[ResultView]:
        if self._mode is not ViewMode.REVIEWING:
            return None
        return self._result_view

    def select(self, document: SelectedInput) -> None:
        """Replace the selected document and clear any displayed error."""
        self._selected = document
        self._error_message = None

    async def analyze(self) -> Optional[AnalysisJob]:
        """Submit the selected document. Does nothing when none is selected."""
        if self._selected is None:
            return None
        self._error_message = None
        return await self._poller.submit(self._selected)

    def reset(self) -> None:
        self._poller.reset()
        self._selected = None
        self._error_message = None
        self._result_view = None
        self._mode = ViewMode.COLLECTING

    def close(self) -> None:
        self._poller.close()

    async def __aenter__(self) -> ViewController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    def _handle_job_change(self, job: AnalysisJob) -> None:
        if job.status is JobStatus.COMPLETED:
            self._result_view = build_result_view(job.result)
            self._mode = ViewMode.REVIEWING
            logger.info("Switching to results view", extra={"job_id": job.id})
            return

        self._result_view = None
        self._mode = ViewMode.COLLECTING
        if job.status is JobStatus.FAILED:
            self._error_message = job.error_message


__all__ = ["ViewController", "ViewMode"]
