"""
Template collection engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.collection.collectors import CollectorRegistry
from app.collection.errors import CollectionFailedError, TemplateNotFoundError
from app.collection.logging_utils import log_event
from app.collection.registry import TemplateRegistry
from app.collection.store import InsightStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionResult:
    """
    Outcome of one successful template collection.
    """

    template_name: str
    data: Any
    item_count: int
    stored: int


def count_items(payload: Any) -> int:
    return len(payload) if isinstance(payload, list) else 1


class CollectionEngine:
    """
    Looks up templates, dispatches them to collectors and files the results.
    """

    def __init__(
        self,
        *,
        registry: TemplateRegistry,
        collectors: CollectorRegistry,
        store: InsightStore,
    ) -> None:
        self._registry = registry
        self._collectors = collectors
        self._store = store

    def collect(self, template_name: str, params: dict[str, Any] | None = None) -> CollectionResult:
        """
        Run the named template and route its payload into the store.

        Raises `TemplateNotFoundError` before any network call when the name is
        unknown, and `CollectionFailedError` when the collector returned nothing
        or an empty body.
        """

        template = self._registry.get(template_name)
        if template is None:
            log_event(logger, logging.WARNING, "template_not_found", template=template_name)
            raise TemplateNotFoundError(template_name)

        payload = self._collectors.for_template(template).collect(template, params or {})
        if payload is None or payload == "":
            raise CollectionFailedError(template_name)

        stored = self._store.route(category=template.category, payload=payload)
        result = CollectionResult(
            template_name=template_name,
            data=payload,
            item_count=count_items(payload),
            stored=stored,
        )
        log_event(
            logger,
            logging.INFO,
            "template_collected",
            template=template_name,
            kind=template.kind.value,
            items=result.item_count,
            stored=stored,
        )
        return result

    def seed_intelligence(self, template_name: str) -> int:
        """
        Fill an empty intelligence list from one template; returns records added.

        Only list payloads are kept. Failures are logged and leave the list empty.
        """

        if self._store.intelligence:
            return 0

        template = self._registry.get(template_name)
        if template is None:
            log_event(logger, logging.WARNING, "seed_template_missing", template=template_name)
            return 0

        log_event(logger, logging.INFO, "intelligence_seed_started", template=template_name)
        payload = self._collectors.for_template(template).collect(template, {})
        if not isinstance(payload, list):
            return 0
        return self._store.add_intelligence(payload)
