"""Representation of the document a user selected for analysis."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SUPPORTED_CONTENT_TYPES: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".pdf": "application/pdf",
}


class UnsupportedDocumentError(ValueError):
    """Raised when a file is not a JPEG, PNG or PDF document."""


@dataclass(frozen=True, slots=True)
class SelectedInput:
    """Binary payload chosen by the user, plus the metadata shown alongside it."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_mb(self) -> str:
        """Size in megabytes with two decimals, as displayed next to the file name."""
        return f"{self.size / 1024 / 1024:.2f}"

    @classmethod
    def from_path(cls, path: str | Path) -> SelectedInput:
        """Load a supported document from disk."""
        file_path = Path(path)
        content_type = SUPPORTED_CONTENT_TYPES.get(file_path.suffix.lower())
        if content_type is None:
            supported = ", ".join(sorted(SUPPORTED_CONTENT_TYPES))
            raise UnsupportedDocumentError(
                f"Unsupported file type '{file_path.suffix}'. Expected one of: {supported}"
            )
        return cls(
            filename=file_path.name,
            content=file_path.read_bytes(),
            content_type=content_type,
        )


__all__ = ["SUPPORTED_CONTENT_TYPES", "SelectedInput", "UnsupportedDocumentError"]
