"""
app/collection/parsing/feed.py

Feed markup extraction.

`RegexFeedParser` is a pattern scan over raw RSS markup, not an XML parser.
Its limits are part of the API response contract and are covered by tests:

- only the first `item_limit` (10) `<item>` blocks are read;
- titles and descriptions are only found inside CDATA sections;
- a found description is cut to `description_max_chars` (200) and always
  gets a `...` suffix;
- missing fields fall back to `No title`, `No description`, an empty link and
  the current UTC time.

Relevance scores are uniform noise in [0, 100), not a ranking. The random
source is injectable so tests can pin it.
"""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from itertools import islice
from typing import Any

ITEM_PATTERN = re.compile(r"<item>(.*?)</item>", flags=re.DOTALL)
TITLE_PATTERN = re.compile(r"<title><!\[CDATA\[(.*?)\]\]></title>")
DESCRIPTION_PATTERN = re.compile(r"<description><!\[CDATA\[(.*?)\]\]></description>")
LINK_PATTERN = re.compile(r"<link>(.*?)</link>")
PUB_DATE_PATTERN = re.compile(r"<pubDate>(.*?)</pubDate>")

DEFAULT_TITLE = "No title"
DEFAULT_DESCRIPTION = "No description"
ELLIPSIS = "..."


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with milliseconds and a `Z` suffix.
    """

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class FeedRecord:
    """
    One extracted feed item.
    """

    title: str
    content: str
    link: str
    date: str
    category: str
    source: str
    relevance_score: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


class FeedParser(ABC):
    """
    Turns raw feed markup into intelligence records.
    """

    @abstractmethod
    def parse(self, markup: str, *, category: str, source: str) -> list[dict[str, Any]]:
        """
        Extract records from `markup`, stamping each with `category` and `source`.
        """


class RegexFeedParser(FeedParser):
    def __init__(
        self,
        *,
        item_limit: int = 10,
        description_max_chars: int = 200,
        rng: random.Random | None = None,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._item_limit = item_limit
        self._description_max_chars = description_max_chars
        self._rng = rng or random.Random()
        self._clock = clock

    def parse(self, markup: str, *, category: str, source: str) -> list[dict[str, Any]]:
        blocks = islice(ITEM_PATTERN.finditer(markup), self._item_limit)
        return [
            self._parse_item(match.group(0), category=category, source=source).as_dict()
            for match in blocks
        ]

    def _parse_item(self, block: str, *, category: str, source: str) -> FeedRecord:
        title = TITLE_PATTERN.search(block)
        description = DESCRIPTION_PATTERN.search(block)
        link = LINK_PATTERN.search(block)
        pub_date = PUB_DATE_PATTERN.search(block)

        return FeedRecord(
            title=title.group(1) if title else DEFAULT_TITLE,
            content=(
                self.truncate(description.group(1)) if description else DEFAULT_DESCRIPTION
            ),
            link=link.group(1) if link else "",
            date=pub_date.group(1) if pub_date else self._clock(),
            category=category,
            source=source,
            relevance_score=self._rng.randrange(100),
        )

    def truncate(self, text: str) -> str:
        return text[: self._description_max_chars] + ELLIPSIS
