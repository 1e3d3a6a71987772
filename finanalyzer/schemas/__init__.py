"""Schema exports."""

from .analysis import (
    AnalysisResult,
    AnalysisSummary,
    Flag,
    JobHandle,
    JobStatusSnapshot,
)
from .documents import SUPPORTED_CONTENT_TYPES, SelectedInput, UnsupportedDocumentError

__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "Flag",
    "JobHandle",
    "JobStatusSnapshot",
    "SUPPORTED_CONTENT_TYPES",
    "SelectedInput",
    "UnsupportedDocumentError",
]
