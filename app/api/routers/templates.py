"""
app/api/routers/templates.py

Template registry endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.collection import InvalidTemplateError, parse_template
from app.collection.logging_utils import log_event
from app.context import AppContext, get_app_context
from app.schemas.collection import (
    ErrorResponse,
    StatusMessageResponse,
    TemplateListResponse,
    TemplateUpsertRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=TemplateListResponse)
def list_templates(context: AppContext = Depends(get_app_context)) -> TemplateListResponse:
    return TemplateListResponse(templates=context.registry.as_dict())


@router.post(
    "",
    response_model=StatusMessageResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def upsert_template(
    body: TemplateUpsertRequest,
    context: AppContext = Depends(get_app_context),
) -> StatusMessageResponse | JSONResponse:
    """
    Add a template or replace the one registered under the same name.
    """

    try:
        template = parse_template(body.template)
    except InvalidTemplateError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    replaced = body.name in context.registry
    context.registry.put(body.name, template)
    log_event(
        logger,
        logging.INFO,
        "template_registered",
        template=body.name,
        kind=template.kind.value,
        replaced=replaced,
    )
    return StatusMessageResponse(message="Template added successfully")
