"""
Template-driven data collection.
"""

from app.collection.engine import CollectionEngine, CollectionResult
from app.collection.errors import (
    CollectionError,
    CollectionFailedError,
    FetchError,
    InvalidTemplateError,
    TemplateNotFoundError,
)
from app.collection.registry import TemplateRegistry, build_registry, default_templates
from app.collection.store import InsightStore
from app.collection.templates import (
    ApiTemplate,
    CrawlerTemplate,
    Template,
    TemplateKind,
    parse_template,
    template_to_dict,
)

__all__ = [
    "ApiTemplate",
    "CollectionEngine",
    "CollectionError",
    "CollectionFailedError",
    "CollectionResult",
    "CrawlerTemplate",
    "FetchError",
    "InsightStore",
    "InvalidTemplateError",
    "Template",
    "TemplateKind",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "build_registry",
    "default_templates",
    "parse_template",
    "template_to_dict",
]
