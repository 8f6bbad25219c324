"""
app/api/routers/dashboard.py

Dashboard endpoints backed by the in-memory store and static samples.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.collection.parsing import utc_now_iso
from app.context import AppContext, get_app_context
from app.domain.dashboard import company_intelligence, dashboard_overview, sample_deals
from app.schemas.dashboard import (
    CompanyIntelligenceResponse,
    DashboardOverviewResponse,
    DealsPipelineResponse,
    IntelligenceFeedResponse,
)

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard/overview", response_model=DashboardOverviewResponse)
def get_overview(context: AppContext = Depends(get_app_context)) -> DashboardOverviewResponse:
    return DashboardOverviewResponse(**dashboard_overview(context.store.counts()))


@router.get("/intelligence/feed", response_model=IntelligenceFeedResponse)
def get_intelligence_feed(
    context: AppContext = Depends(get_app_context),
) -> IntelligenceFeedResponse:
    """
    Return stored intelligence, seeding it from the feed template on first read.
    """

    if context.settings.lazy_seed and not context.store.intelligence:
        context.engine.seed_intelligence(context.settings.seed_template)

    return IntelligenceFeedResponse(
        intelligence=context.store.recent_intelligence(context.settings.intelligence_page_size),
        last_updated=utc_now_iso(),
    )


@router.get("/deals/pipeline", response_model=DealsPipelineResponse)
def get_deals_pipeline(context: AppContext = Depends(get_app_context)) -> DealsPipelineResponse:
    # Every call resets the pipeline to the sample deals.
    context.store.replace_deals(sample_deals())
    return DealsPipelineResponse(deals=context.store.deals)


@router.get(
    "/companies/{company_id}/intelligence",
    response_model=CompanyIntelligenceResponse,
)
def get_company_intelligence(company_id: str) -> CompanyIntelligenceResponse:
    return CompanyIntelligenceResponse(**company_intelligence(company_id))
