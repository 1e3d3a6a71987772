"""Service layer exports."""

from .job_poller import DEFAULT_FAILURE_MESSAGE, AnalysisJob, JobPoller, JobStatus
from .polling import PollTimer
from .result_view import (
    NO_ISSUES_MESSAGE,
    ZERO_SAVINGS,
    QuickAction,
    ResultView,
    TableRow,
    build_result_view,
)
from .view_controller import ViewController, ViewMode

__all__ = [
    "AnalysisJob",
    "DEFAULT_FAILURE_MESSAGE",
    "JobPoller",
    "JobStatus",
    "NO_ISSUES_MESSAGE",
    "PollTimer",
    "QuickAction",
    "ResultView",
    "TableRow",
    "ViewController",
    "ViewMode",
    "ZERO_SAVINGS",
    "build_result_view",
]
