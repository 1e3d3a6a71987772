"""Expose constructed client wrappers."""

from .analysis_api import (
    AnalysisApiClient,
    AnalysisServiceError,
    ProtocolError,
    RemoteAnalysisError,
    TransportError,
)

__all__ = [
    "AnalysisApiClient",
    "AnalysisServiceError",
    "ProtocolError",
    "RemoteAnalysisError",
    "TransportError",
]
