"""
app/schemas/dashboard.py

Response schemas for dashboard and health endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DashboardOverviewResponse(BaseModel):
    total_deals: int = Field(..., ge=0)
    total_companies: int = Field(..., ge=0)
    total_intelligence: int = Field(..., ge=0)
    revenue_target: int
    opportunities: int
    win_rate: float
    avg_deal_size: int


class IntelligenceFeedResponse(BaseModel):
    """
    First page of stored intelligence records.
    """

    intelligence: list[Any]
    last_updated: str


class DealResponse(BaseModel):
    id: int
    company: str
    stage: str
    value: int
    probability: int = Field(..., ge=0, le=100)
    close_date: str
    status: str


class DealsPipelineResponse(BaseModel):
    deals: list[DealResponse]


class DecisionMakerResponse(BaseModel):
    name: str
    role: str
    linkedin: str


class CompanyIntelligenceResponse(BaseModel):
    company_id: str
    funding_stage: str
    total_funding: str
    employee_count: str
    growth_signals: list[str]
    pain_points: list[str]
    decision_makers: list[DecisionMakerResponse]


class DataCountsResponse(BaseModel):
    intelligence: int = Field(..., ge=0)
    companies: int = Field(..., ge=0)
    deals: int = Field(..., ge=0)


class HealthResponse(BaseModel):
    """
    Liveness plus current store sizes.
    """

    status: str
    timestamp: str
    data_counts: DataCountsResponse
