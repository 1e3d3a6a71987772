"""HTTP client for the remote document analysis service."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from finanalyzer.schemas import JobHandle, JobStatusSnapshot, SelectedInput

logger = logging.getLogger(__name__)


class AnalysisServiceError(RuntimeError):
    """Base class for failures talking to or reported by the analysis service."""


class TransportError(AnalysisServiceError):
    """Raised when the service is unreachable or answers with a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(AnalysisServiceError):
    """Raised when a response body cannot be decoded into the expected shape."""


class RemoteAnalysisError(AnalysisServiceError):
    """The service reported the analysis job as failed."""


class AnalysisApiClient:
    """Submit documents and query job status.

    Holds configuration only; every call opens its own ``httpx.AsyncClient``
    and nothing is retried here.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    async def submit(self, document: SelectedInput) -> JobHandle:
        """Upload a document as a single multipart ``file`` field."""
        files = {
            "file": (document.filename, document.content, document.content_type),
        }
        try:
            async with self._client() as client:
                response = await client.post("/upload", files=files)
        except httpx.HTTPError as exc:
            raise TransportError(f"Upload failed: {exc}") from exc

        if not response.is_success:
            raise TransportError("Upload failed", status_code=response.status_code)

        handle = _decode(response, JobHandle)
        logger.info(
            "Uploaded document for analysis",
            extra={"job_id": handle.analysis_id},
        )
        return handle

    async def fetch_status(self, analysis_id: str) -> JobStatusSnapshot:
        """Issue a single status query for ``analysis_id``."""
        try:
            async with self._client() as client:
                response = await client.get(f"/analysis/{analysis_id}")
        except httpx.HTTPError as exc:
            raise TransportError(f"Status request failed: {exc}") from exc

        if not response.is_success:
            raise TransportError(
                f"Status request failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return _decode(response, JobStatusSnapshot)

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {
            "base_url": self._base_url,
            "timeout": self._timeout,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)


def _decode(response: httpx.Response, model: type[BaseModel]) -> Any:
    try:
        payload = response.json()
    except ValueError as exc:
        raise ProtocolError(f"Response from {response.url} is not valid JSON") from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ProtocolError(
            f"Unexpected response shape from {response.url}: {exc.errors()}"
        ) from exc


__all__ = [
    "AnalysisApiClient",
    "AnalysisServiceError",
    "ProtocolError",
    "RemoteAnalysisError",
    "TransportError",
]
