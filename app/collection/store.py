"""
app/collection/store.py

Process-lifetime in-memory record lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

INTELLIGENCE_CATEGORY_MARKERS = ("news", "intelligence")


def routes_to_intelligence(category: str) -> bool:
    return any(marker in category for marker in INTELLIGENCE_CATEGORY_MARKERS)


class InsightStore:
    """
    Append-only record lists for intelligence, companies and deals.

    Nothing is persisted, deduplicated or updated in place. The deals list is
    the one exception: the pipeline endpoint replaces it wholesale.
    """

    def __init__(self) -> None:
        self.intelligence: list[Any] = []
        self.companies: list[Any] = []
        self.deals: list[dict[str, Any]] = []

    def add_intelligence(self, records: Iterable[Any]) -> int:
        before = len(self.intelligence)
        self.intelligence.extend(records)
        return len(self.intelligence) - before

    def route(self, *, category: str, payload: Any) -> int:
        """
        Store a collection payload by template category; returns records added.

        Only categories mentioning news or intelligence are kept. A list payload
        contributes each element; anything else is one record.
        """

        if not routes_to_intelligence(category):
            return 0
        if isinstance(payload, list):
            return self.add_intelligence(payload)
        return self.add_intelligence([payload])

    def recent_intelligence(self, limit: int) -> list[Any]:
        return self.intelligence[:limit]

    def replace_deals(self, deals: Iterable[dict[str, Any]]) -> None:
        self.deals = list(deals)

    def counts(self) -> dict[str, int]:
        return {
            "intelligence": len(self.intelligence),
            "companies": len(self.companies),
            "deals": len(self.deals),
        }
