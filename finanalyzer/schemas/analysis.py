"""
Pydantic models for the remote analysis service's wire format.

The service owns anomaly detection, so these models are deliberately lenient:
every field is optional and unknown keys are ignored.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_as_empty_list(value: Any) -> Any:
    """The service serialises missing lists as JSON null."""
    return [] if value is None else value


class Flag(BaseModel):
    """One billing anomaly attached to a transaction."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    transaction_date: Optional[str] = None
    transaction_description: Optional[str] = Field(
        None, description="Merchant or transaction narrative from the statement."
    )
    transaction_amount: Optional[str | float] = None
    transaction_type: Optional[str] = None
    issue_type: Optional[str] = Field(
        None,
        alias="type",
        description="Free-form category tag such as duplicate_charge.",
    )
    severity: Optional[str] = Field(
        None, description="One of HIGH, MEDIUM or LOW."
    )
    issue_description: Optional[str] = Field(None, alias="description")


class AnalysisSummary(BaseModel):
    """Aggregate counts reported by the service."""

    model_config = ConfigDict(extra="ignore")

    total_issues: Optional[int] = None
    total_transactions: Optional[int] = None
    high_priority_count: Optional[int] = None
    medium_priority_count: Optional[int] = None
    low_priority_count: Optional[int] = None
    duplicate_transactions: Optional[int] = None
    hidden_fees: Optional[int] = None
    estimated_total_savings: Optional[str] = Field(
        None, description="Currency-formatted recoverable amount, e.g. '£12.50'."
    )
    next_steps: List[str] = Field(default_factory=list)

    @field_validator("next_steps", mode="before")
    @classmethod
    def _null_steps(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class AnalysisResult(BaseModel):
    """Structured outcome of a completed analysis job."""

    model_config = ConfigDict(extra="ignore")

    summary: Optional[AnalysisSummary] = None
    red_flags: List[Flag] = Field(default_factory=list)

    @field_validator("red_flags", mode="before")
    @classmethod
    def _null_flags(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class JobHandle(BaseModel):
    """Response of ``POST /upload``."""

    analysis_id: str = Field(..., min_length=1)


class JobStatusSnapshot(BaseModel):
    """Response of ``GET /analysis/{analysis_id}``."""

    model_config = ConfigDict(extra="ignore")

    status: str
    result: Optional[AnalysisResult] = None
    error_message: Optional[str] = None


__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "Flag",
    "JobHandle",
    "JobStatusSnapshot",
]
