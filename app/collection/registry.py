"""
Template registry with the built-in starter templates.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from app.collection.errors import InvalidTemplateError
from app.collection.logging_utils import log_event
from app.collection.templates import (
    ApiTemplate,
    CrawlerTemplate,
    Template,
    parse_template,
    template_to_dict,
)

logger = logging.getLogger(__name__)


def default_templates() -> dict[str, Template]:
    """
    Starter templates registered at process start.
    """

    return {
        "techcrunch_rss": ApiTemplate(
            url="https://techcrunch.com/feed/",
            category="industry_news",
            extract={
                "title": "title",
                "content": "description",
                "date": "pubDate",
                "link": "link",
            },
        ),
        "company_crawler": CrawlerTemplate(
            url_pattern="https://www.crunchbase.com/organization/{company_slug}",
            category="company_intelligence",
            selectors={
                "funding_stage": ".funding-stage",
                "total_funding": ".total-funding",
                "employee_count": ".employee-count",
                "last_funding": ".last-funding-date",
            },
        ),
        "ycombinator_api": ApiTemplate(
            url="https://hacker-news.firebaseio.com/v0/topstories.json",
            category="startup_news",
            extract={"story_ids": "array"},
        ),
    }


class TemplateRegistry:
    """
    Name to template map; writes always replace, last write wins.
    """

    def __init__(self, templates: Mapping[str, Template] | None = None) -> None:
        self._templates: dict[str, Template] = dict(
            default_templates() if templates is None else templates
        )

    def get(self, name: str) -> Template | None:
        return self._templates.get(name)

    def put(self, name: str, template: Template) -> None:
        self._templates[name] = template

    def names(self) -> list[str]:
        return list(self._templates)

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {name: template_to_dict(template) for name, template in self._templates.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)


def load_template_file(*, config_path: str) -> dict[str, Template]:
    """
    Load extra templates from a JSON file shaped as `{"templates": {name: {...}}}`.

    Entries that are not objects or declare an unknown type are skipped.
    """

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Template config file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    entries = raw_data.get("templates", {}) if isinstance(raw_data, dict) else None
    if not isinstance(entries, dict):
        raise ValueError("Invalid template config: 'templates' must be an object.")

    loaded: dict[str, Template] = {}
    for name, entry in entries.items():
        if not isinstance(name, str) or not name.strip():
            continue
        try:
            loaded[name.strip()] = parse_template(entry)
        except InvalidTemplateError as exc:
            log_event(
                logger,
                logging.WARNING,
                "template_config_entry_skipped",
                template=name,
                path=str(path),
                error=str(exc),
            )
    return loaded


def build_registry(*, config_path: str | None = None) -> TemplateRegistry:
    """
    Registry seeded with the starter set plus any templates from `config_path`.
    """

    registry = TemplateRegistry()
    if config_path:
        for name, template in load_template_file(config_path=config_path).items():
            registry.put(name, template)
        log_event(
            logger,
            logging.INFO,
            "template_config_loaded",
            path=config_path,
            templates=len(registry),
        )
    return registry
