"""
Collector for API and feed templates.
"""

from __future__ import annotations

from typing import Any

from app.collection.collectors.base import Collector
from app.collection.fetcher import SourceFetcher
from app.collection.parsing import FeedParser, RegexFeedParser
from app.collection.templates import ApiTemplate

FEED_URL_MARKERS = ("feed", "rss")


def looks_like_feed(url: str) -> bool:
    return any(marker in url for marker in FEED_URL_MARKERS)


class ApiCollector(Collector[ApiTemplate]):
    """
    GET the template URL with caller params as the query string.

    Feed-looking URLs are parsed into a list of records; any other body is
    returned untouched as one opaque record.
    """

    def __init__(
        self,
        *,
        fetcher: SourceFetcher,
        feed_parser: FeedParser | None = None,
    ) -> None:
        super().__init__(fetcher=fetcher)
        self.feed_parser = feed_parser or RegexFeedParser()

    def fetch_and_extract(self, template: ApiTemplate, params: dict[str, Any]) -> Any:
        if looks_like_feed(template.url):
            markup = self.fetcher.get_text(template.url, params=params)
            return self.feed_parser.parse(
                markup,
                category=template.category,
                source=template.source,
            )
        return self.fetcher.get_body(template.url, params=params)
