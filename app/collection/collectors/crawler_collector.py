"""
Collector for single-page crawler templates.
"""

from __future__ import annotations

import re
from typing import Any

from app.collection.collectors.base import Collector
from app.collection.errors import CollectionError
from app.collection.parsing import SelectorExtractor
from app.collection.templates import CrawlerTemplate

# The whole text between the braces is the param name, format specs included.
PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def resolve_target_url(template: CrawlerTemplate, params: dict[str, Any]) -> str:
    """
    Pick the page to crawl.

    A literal `url` param wins; otherwise every `{token}` in the template's URL
    pattern is filled from the param of the same name.
    """

    literal = params.get("url")
    if literal:
        return str(literal)

    tokens = PLACEHOLDER_PATTERN.findall(template.url_pattern)
    missing = [name for name in tokens if params.get(name) in (None, "")]
    if missing:
        raise CollectionError(
            f"Missing URL parameters {', '.join(missing)} for pattern {template.url_pattern}"
        )
    return PLACEHOLDER_PATTERN.sub(lambda match: str(params[match.group(1)]), template.url_pattern)


class CrawlerCollector(Collector[CrawlerTemplate]):
    def fetch_and_extract(self, template: CrawlerTemplate, params: dict[str, Any]) -> dict[str, str]:
        target_url = resolve_target_url(template, params)
        html = self.fetcher.get_text(target_url)
        return SelectorExtractor.extract(html=html, selectors=template.selectors)
