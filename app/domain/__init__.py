"""
app/domain package marker.
"""

from app.domain.dashboard import company_intelligence, dashboard_overview, sample_deals

__all__ = [
    "company_intelligence",
    "dashboard_overview",
    "sample_deals",
]
