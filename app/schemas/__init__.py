"""
app/schemas package marker.
"""

from app.schemas.collection import (
    CollectTemplateRequest,
    CollectTemplateResponse,
    ErrorResponse,
    StatusMessageResponse,
    TemplateListResponse,
    TemplateUpsertRequest,
)
from app.schemas.dashboard import (
    CompanyIntelligenceResponse,
    DashboardOverviewResponse,
    DealsPipelineResponse,
    HealthResponse,
    IntelligenceFeedResponse,
)

__all__ = [
    "CollectTemplateRequest",
    "CollectTemplateResponse",
    "CompanyIntelligenceResponse",
    "DashboardOverviewResponse",
    "DealsPipelineResponse",
    "ErrorResponse",
    "HealthResponse",
    "IntelligenceFeedResponse",
    "StatusMessageResponse",
    "TemplateListResponse",
    "TemplateUpsertRequest",
]
