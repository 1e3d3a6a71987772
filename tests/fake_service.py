"""In-process stand-in for the remote analysis service."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, File, HTTPException, UploadFile


def create_fake_service(
    statuses: list[dict[str, Any]],
    *,
    analysis_id: str = "job-123",
) -> FastAPI:
    """Build an app that serves ``statuses`` in order, repeating the last one."""
    app = FastAPI()
    app.state.uploads = []
    app.state.status_requests = []
    remaining = list(statuses)

    @app.post("/upload")
    async def upload(file: UploadFile = File(...)) -> dict[str, str]:
        app.state.uploads.append(
            {
                "filename": file.filename,
                "content_type": file.content_type,
                "content": await file.read(),
            }
        )
        return {"analysis_id": analysis_id}

    @app.get("/analysis/{requested_id}")
    async def analysis_status(requested_id: str) -> dict[str, Any]:
        app.state.status_requests.append(requested_id)
        if requested_id != analysis_id:
            raise HTTPException(status_code=404, detail="Unknown analysis id")
        if len(remaining) > 1:
            return remaining.pop(0)
        return remaining[0]

    return app
