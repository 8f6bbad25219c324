"""
app/api/routers/collection.py

Template collection endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.collection import CollectionFailedError, TemplateNotFoundError
from app.context import AppContext, get_app_context
from app.schemas.collection import (
    CollectTemplateRequest,
    CollectTemplateResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/api", tags=["collection"])


@router.post(
    "/collect/template",
    response_model=CollectTemplateResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def collect_template(
    body: CollectTemplateRequest,
    context: AppContext = Depends(get_app_context),
) -> CollectTemplateResponse | JSONResponse:
    """
    Run one registered template and store its records by category.
    """

    try:
        result = context.engine.collect(body.template_name, body.params or {})
    except TemplateNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="Template not found").model_dump(),
        )
    except CollectionFailedError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to collect data").model_dump(),
        )

    return CollectTemplateResponse(
        data=result.data,
        message=f"Collected {result.item_count} items",
    )
