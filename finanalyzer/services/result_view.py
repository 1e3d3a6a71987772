"""Derive the results presentation model from a raw analysis result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from finanalyzer.schemas import AnalysisResult, AnalysisSummary, Flag

ZERO_SAVINGS = "£0.00"
NO_ISSUES_MESSAGE = "No problematic transactions detected in this document"

_SEVERITY_ICONS = {
    "HIGH": "🔴",
    "MEDIUM": "🟡",
    "LOW": "🟢",
}
_UNKNOWN_SEVERITY_ICON = "⚪"
_DUPLICATE_CHARGE_TYPES = {"duplicate_charge", "duplicate-charge"}


@dataclass(slots=True)
class QuickAction:
    """Suggested follow-up shown above the transaction table."""

    kind: str
    title: str
    detail: str
    count: Optional[int] = None


@dataclass(slots=True)
class TableRow:
    date: str = ""
    description: str = ""
    amount: str = ""
    transaction_type: str = ""
    issue: str = ""
    severity: Optional[str] = None
    placeholder: bool = False


@dataclass(slots=True)
class ResultView:
    """Everything the results screen renders, with defaults already applied."""

    total_issues: int = 0
    total_transactions: int = 0
    high_priority_count: int = 0
    medium_priority_count: int = 0
    low_priority_count: int = 0
    duplicate_count: int = 0
    hidden_fee_count: int = 0
    estimated_savings: str = ZERO_SAVINGS
    quick_actions: List[QuickAction] = field(default_factory=list)
    rows: List[TableRow] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)

    @property
    def billing_issue_count(self) -> int:
        return self.duplicate_count + self.hidden_fee_count

    @property
    def numbered_next_steps(self) -> List[str]:
        return [f"{index}. {step}" for index, step in enumerate(self.next_steps, start=1)]


def severity_icon(severity: Optional[str]) -> str:
    return _SEVERITY_ICONS.get(severity or "", _UNKNOWN_SEVERITY_ICON)


def build_result_view(result: Optional[AnalysisResult]) -> ResultView:
    """Map ``result`` to a :class:`ResultView` without mutating it."""
    result = result or AnalysisResult()
    summary = result.summary or AnalysisSummary()
    flags = list(result.red_flags)

    return ResultView(
        total_issues=summary.total_issues or 0,
        total_transactions=summary.total_transactions or 0,
        high_priority_count=summary.high_priority_count or 0,
        medium_priority_count=summary.medium_priority_count or 0,
        low_priority_count=summary.low_priority_count or 0,
        duplicate_count=summary.duplicate_transactions or 0,
        hidden_fee_count=summary.hidden_fees or 0,
        estimated_savings=summary.estimated_total_savings or ZERO_SAVINGS,
        quick_actions=derive_quick_actions(flags),
        rows=project_rows(flags),
        next_steps=list(summary.next_steps),
    )


def derive_quick_actions(flags: List[Flag]) -> List[QuickAction]:
    if not flags:
        return []

    actions: List[QuickAction] = []
    high_count = sum(1 for flag in flags if flag.severity == "HIGH")
    if high_count:
        actions.append(
            QuickAction(
                kind="high_priority",
                title="Address High Priority Issues",
                detail=f"{high_count} critical issues need attention",
                count=high_count,
            )
        )
    if any(flag.issue_type in _DUPLICATE_CHARGE_TYPES for flag in flags):
        actions.append(
            QuickAction(
                kind="request_refunds",
                title="Request Refunds",
                detail="Contact providers about duplicate charges",
            )
        )
    actions.append(
        QuickAction(
            kind="monitor_bills",
            title="Monitor Future Bills",
            detail="Watch for similar issues going forward",
        )
    )
    return actions


def project_rows(flags: List[Flag]) -> List[TableRow]:
    """One row per flag in service order, or a single placeholder row."""
    if not flags:
        return [TableRow(description=NO_ISSUES_MESSAGE, placeholder=True)]

    return [
        TableRow(
            date=flag.transaction_date or "",
            description=flag.transaction_description or "",
            amount=_display(flag.transaction_amount),
            transaction_type=flag.transaction_type or "",
            issue=f"{severity_icon(flag.severity)} {flag.issue_description or ''}".rstrip(),
            severity=flag.severity,
        )
        for flag in flags
    ]


def _display(value: object) -> str:
    return "" if value is None else str(value)


__all__ = [
    "NO_ISSUES_MESSAGE",
    "QuickAction",
    "ResultView",
    "TableRow",
    "ZERO_SAVINGS",
    "build_result_view",
    "derive_quick_actions",
    "project_rows",
    "severity_icon",
]
