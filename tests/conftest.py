"""Pytest configuration shared across the suite."""

import _bootstrap  # noqa: F401

from typing import Any

import pytest

from finanalyzer.schemas import SelectedInput


@pytest.fixture
def document() -> SelectedInput:
    return SelectedInput(
        filename="statement.pdf",
        content=b"%PDF-1.4 fake statement",
        content_type="application/pdf",
    )


@pytest.fixture
def completed_payload() -> dict[str, Any]:
    """Status body for a finished job, in the service's wire format."""
    return {
        "status": "completed",
        "result": {
            "summary": {
                "total_issues": 3,
                "total_transactions": 42,
                "high_priority_count": 1,
                "medium_priority_count": 1,
                "low_priority_count": 1,
                "duplicate_transactions": 2,
                "hidden_fees": 1,
                "estimated_total_savings": "£57.98",
                "next_steps": [
                    "Contact Netflix about the duplicate charge",
                    "Ask the bank to waive the foreign transaction fee",
                ],
            },
            "red_flags": [
                {
                    "transaction_date": "2024-03-02",
                    "transaction_description": "NETFLIX.COM",
                    "transaction_amount": "£15.99",
                    "transaction_type": "debit",
                    "type": "duplicate_charge",
                    "severity": "HIGH",
                    "description": "Charged twice on the same day",
                },
                {
                    "transaction_date": "2024-03-05",
                    "transaction_description": "FX FEE",
                    "transaction_amount": "£2.00",
                    "transaction_type": "fee",
                    "type": "hidden_fee",
                    "severity": "LOW",
                    "description": "Undisclosed foreign transaction fee",
                },
            ],
        },
    }
