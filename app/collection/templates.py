"""
app/collection/templates.py

Collection template models and wire-format conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from app.collection.errors import InvalidTemplateError

DEFAULT_SOURCE_LABEL = "TechCrunch"


class TemplateKind(str, Enum):
    """
    Source kinds a template can describe.
    """

    API = "api"
    CRAWLER = "crawler"


@dataclass(frozen=True)
class ApiTemplate:
    """
    HTTP API or feed endpoint fetched as-is with caller params as query string.

    `extract` documents the feed fields of interest and is not used to route
    extraction; feed URLs always go through the feed parser.
    """

    url: str
    category: str
    extract: dict[str, str] = field(default_factory=dict)
    source: str = DEFAULT_SOURCE_LABEL

    kind = TemplateKind.API


@dataclass(frozen=True)
class CrawlerTemplate:
    """
    Single web page scraped with one CSS selector per output field.
    """

    url_pattern: str
    category: str
    selectors: dict[str, str] = field(default_factory=dict)

    kind = TemplateKind.CRAWLER


Template = Union[ApiTemplate, CrawlerTemplate]


def parse_template(payload: dict[str, Any]) -> Template:
    """
    Build a template from its loose JSON shape.

    Accepts `type` or `kind` for the source kind and `url_template` or
    `url_pattern` for crawler URLs. Only the kind is checked; everything else
    is taken as given.
    """

    if not isinstance(payload, dict):
        raise InvalidTemplateError("Template must be a JSON object.")

    raw_kind = payload.get("type", payload.get("kind"))
    try:
        kind = TemplateKind(str(raw_kind).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in TemplateKind)
        raise InvalidTemplateError(
            f"Unsupported template type '{raw_kind}'. Allowed types: {allowed}."
        ) from exc

    category = str(payload.get("category") or "")
    if kind is TemplateKind.API:
        return ApiTemplate(
            url=str(payload.get("url") or ""),
            category=category,
            extract=_string_map(payload.get("extract")),
            source=str(payload.get("source") or DEFAULT_SOURCE_LABEL),
        )
    return CrawlerTemplate(
        url_pattern=str(payload.get("url_template") or payload.get("url_pattern") or ""),
        category=category,
        selectors=_string_map(payload.get("selectors")),
    )


def template_to_dict(template: Template) -> dict[str, Any]:
    """
    Render a template in the JSON shape accepted by `parse_template`.

    Only the fields of the template variant are rendered. Other keys sent at
    registration are not kept.
    """

    if isinstance(template, ApiTemplate):
        payload: dict[str, Any] = {
            "type": template.kind.value,
            "url": template.url,
            "category": template.category,
            "extract": dict(template.extract),
        }
        if template.source != DEFAULT_SOURCE_LABEL:
            payload["source"] = template.source
        return payload
    return {
        "type": template.kind.value,
        "url_template": template.url_pattern,
        "category": template.category,
        "selectors": dict(template.selectors),
    }


def _string_map(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}
