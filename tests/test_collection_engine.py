"""
tests/test_collection_engine.py

Engine lookup, store routing and lazy intelligence seeding.
"""

from __future__ import annotations

import pytest

from app.collection import (
    ApiTemplate,
    CollectionFailedError,
    CrawlerTemplate,
    InsightStore,
    TemplateNotFoundError,
)
from app.collection.store import routes_to_intelligence
from app.context import AppContext
from conftest import FakeSession, rss_document, rss_item

FEED_URL = "https://techcrunch.com/feed/"


class TestStoreRouting:
    @pytest.mark.parametrize(
        "category, expected",
        [
            ("industry_news", True),
            ("startup_news", True),
            ("company_intelligence", True),
            ("pricing", False),
            ("NEWS", False),
            ("", False),
        ],
    )
    def test_category_markers(self, category: str, expected: bool) -> None:
        assert routes_to_intelligence(category) is expected

    def test_list_payload_is_extended(self) -> None:
        store = InsightStore()
        assert store.route(category="industry_news", payload=[{"a": 1}, {"b": 2}]) == 2
        assert store.intelligence == [{"a": 1}, {"b": 2}]

    def test_single_payload_is_appended_once(self) -> None:
        store = InsightStore()
        assert store.route(category="company_intelligence", payload={"funding_stage": ""}) == 1
        assert store.counts() == {"intelligence": 1, "companies": 0, "deals": 0}

    def test_other_categories_are_dropped(self) -> None:
        store = InsightStore()
        assert store.route(category="pricing", payload=[1, 2, 3]) == 0
        assert store.intelligence == []

    def test_replace_deals_overwrites(self) -> None:
        store = InsightStore()
        store.replace_deals([{"id": 1}, {"id": 2}])
        store.replace_deals([{"id": 3}])
        assert store.deals == [{"id": 3}]


class TestCollect:
    def test_unknown_template_raises_without_network(
        self, context: AppContext, session: FakeSession
    ) -> None:
        with pytest.raises(TemplateNotFoundError):
            context.engine.collect("does_not_exist", {})
        assert session.calls == []

    def test_feed_collection_is_stored_and_counted(
        self, context: AppContext, session: FakeSession
    ) -> None:
        session.add(FEED_URL, rss_document(*(rss_item(i) for i in range(15))))

        result = context.engine.collect("techcrunch_rss", {})

        assert result.item_count == 10
        assert result.stored == 10
        assert context.store.intelligence == result.data

    def test_failed_collection_raises_and_stores_nothing(self, context: AppContext) -> None:
        with pytest.raises(CollectionFailedError):
            context.engine.collect("techcrunch_rss")
        assert context.store.intelligence == []

    def test_crawler_record_counts_as_one_item(
        self, context: AppContext, session: FakeSession
    ) -> None:
        session.add("https://www.crunchbase.com/organization/acme", "<p class='funding-stage'>A</p>")

        result = context.engine.collect("company_crawler", {"company_slug": "acme"})

        assert result.item_count == 1
        assert result.data["funding_stage"] == "A"
        assert result.data["total_funding"] == ""
        assert context.store.intelligence == [result.data]

    def test_uncategorised_result_is_returned_but_not_stored(
        self, context: AppContext, session: FakeSession
    ) -> None:
        context.registry.put(
            "pricing", CrawlerTemplate(url_pattern="https://{domain}/pricing", category="pricing")
        )
        session.add("https://acme.test/pricing", "<html></html>")

        result = context.engine.collect("pricing", {"domain": "acme.test"})

        assert result.data == {}
        assert result.stored == 0
        assert context.store.intelligence == []

    def test_opaque_api_body_is_one_record(
        self, context: AppContext, session: FakeSession
    ) -> None:
        url = "https://hacker-news.firebaseio.com/v0/topstories.json"
        session.add(url, "[1, 2, 3]", content_type="application/json")

        result = context.engine.collect("ycombinator_api", {})

        assert result.data == [1, 2, 3]
        assert result.item_count == 3
        assert context.store.intelligence == [1, 2, 3]

    def test_empty_body_is_a_failed_collection(
        self, context: AppContext, session: FakeSession
    ) -> None:
        session.add("https://hacker-news.firebaseio.com/v0/topstories.json", "")

        with pytest.raises(CollectionFailedError):
            context.engine.collect("ycombinator_api", {})
        assert context.store.intelligence == []


class TestSeedIntelligence:
    def test_seeds_empty_store_once(self, context: AppContext, session: FakeSession) -> None:
        session.add(FEED_URL, rss_document(rss_item(1), rss_item(2)))

        assert context.engine.seed_intelligence("techcrunch_rss") == 2
        assert context.engine.seed_intelligence("techcrunch_rss") == 0
        assert len(session.calls) == 1

    def test_seed_failure_leaves_store_empty(self, context: AppContext) -> None:
        assert context.engine.seed_intelligence("techcrunch_rss") == 0
        assert context.store.intelligence == []

    def test_missing_seed_template_is_ignored(
        self, context: AppContext, session: FakeSession
    ) -> None:
        assert context.engine.seed_intelligence("gone") == 0
        assert session.calls == []

    def test_non_list_seed_payload_is_ignored(
        self, context: AppContext, session: FakeSession
    ) -> None:
        context.registry.put("status", ApiTemplate(url="https://api.test/status", category="news"))
        session.add("https://api.test/status", "up")
        assert context.engine.seed_intelligence("status") == 0
