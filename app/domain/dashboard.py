"""
app/domain/dashboard.py

Static sample data behind the dashboard endpoints.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

REVENUE_TARGET = 12_500_000
OPPORTUNITIES = 320
WIN_RATE = 28.5
AVG_DEAL_SIZE = 78_500


@dataclass(frozen=True)
class SampleDeal:
    """
    One pipeline deal shown on the dashboard.
    """

    id: int
    company: str
    stage: str
    value: int
    probability: int
    close_date: str
    status: str


SAMPLE_DEALS: tuple[SampleDeal, ...] = (
    SampleDeal(
        id=1,
        company="Saigon Fintech",
        stage="Negotiation",
        value=145_000,
        probability=75,
        close_date="2025-02-15",
        status="hot",
    ),
    SampleDeal(
        id=2,
        company="Vietnam AI Solutions",
        stage="Proposal",
        value=89_000,
        probability=60,
        close_date="2025-03-01",
        status="warm",
    ),
    SampleDeal(
        id=3,
        company="Singapore B2B Platform",
        stage="Discovery",
        value=156_000,
        probability=40,
        close_date="2025-03-15",
        status="cold",
    ),
)


def sample_deals() -> list[dict[str, Any]]:
    return [asdict(deal) for deal in SAMPLE_DEALS]


def dashboard_overview(counts: dict[str, int]) -> dict[str, Any]:
    """
    Overview counters from the store merged with the fixed sales targets.
    """

    return {
        "total_deals": counts["deals"],
        "total_companies": counts["companies"],
        "total_intelligence": counts["intelligence"],
        "revenue_target": REVENUE_TARGET,
        "opportunities": OPPORTUNITIES,
        "win_rate": WIN_RATE,
        "avg_deal_size": AVG_DEAL_SIZE,
    }


def company_intelligence(company_id: str) -> dict[str, Any]:
    # Synthetic profile; only the id comes from the request.
    return {
        "company_id": company_id,
        "funding_stage": "Series A",
        "total_funding": "$2.5M",
        "employee_count": "25-50",
        "growth_signals": [
            "Recently hired 5 new engineers",
            "Expanded to Singapore market",
            "Partnership with major bank announced",
        ],
        "pain_points": [
            "Scaling customer acquisition",
            "Need better GTM processes",
            "Looking for marketing automation",
        ],
        "decision_makers": [
            {"name": "Anh Tuan Nguyen", "role": "CEO", "linkedin": "linkedin.com/in/anhtuan"},
            {"name": "Linh Pham", "role": "CMO", "linkedin": "linkedin.com/in/linhpham"},
        ],
    }
