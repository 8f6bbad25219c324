"""
Collector lookup by template kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.collection.collectors.api_collector import ApiCollector
from app.collection.collectors.base import Collector
from app.collection.collectors.crawler_collector import CrawlerCollector
from app.collection.fetcher import SourceFetcher
from app.collection.parsing import FeedParser
from app.collection.templates import Template, TemplateKind


class CollectorRegistry:
    """
    One collector per `TemplateKind`; construction fails if a kind is uncovered.
    """

    def __init__(self, collectors: Mapping[TemplateKind, Collector[Any]]) -> None:
        missing = [kind.value for kind in TemplateKind if kind not in collectors]
        if missing:
            raise ValueError(f"No collector registered for template kinds: {', '.join(missing)}.")
        self._collectors = dict(collectors)

    @classmethod
    def default(
        cls,
        *,
        fetcher: SourceFetcher,
        feed_parser: FeedParser | None = None,
    ) -> CollectorRegistry:
        return cls(
            {
                TemplateKind.API: ApiCollector(fetcher=fetcher, feed_parser=feed_parser),
                TemplateKind.CRAWLER: CrawlerCollector(fetcher=fetcher),
            }
        )

    def for_template(self, template: Template) -> Collector[Any]:
        return self._collectors[template.kind]
