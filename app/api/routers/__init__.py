"""
app/api/routers package marker.
"""

from app.api.routers.collection import router as collection_router
from app.api.routers.dashboard import router as dashboard_router
from app.api.routers.templates import router as templates_router

__all__ = [
    "collection_router",
    "dashboard_router",
    "templates_router",
]
