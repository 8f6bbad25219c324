"""
app/schemas/collection.py

Request and response schemas for template collection endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CollectTemplateRequest(BaseModel):
    """
    Body of a template collection call.
    """

    template_name: str = ""
    params: dict[str, Any] | None = None


class CollectTemplateResponse(BaseModel):
    success: bool = True
    data: Any
    message: str


class TemplateUpsertRequest(BaseModel):
    """
    Body of a template registration; the template object is stored as given.
    """

    name: str = Field(..., min_length=1)
    template: dict[str, Any]


class TemplateListResponse(BaseModel):
    templates: dict[str, dict[str, Any]]


class StatusMessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
