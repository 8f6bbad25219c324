"""
tests/test_feed_parser.py

Regex feed extraction: item cap, truncation, defaults and score noise.
"""

from __future__ import annotations

import random
import re

import pytest

from app.collection.parsing import RegexFeedParser, utc_now_iso
from app.collection.parsing.feed import DEFAULT_DESCRIPTION, DEFAULT_TITLE
from conftest import rss_document, rss_item


@pytest.fixture()
def parser() -> RegexFeedParser:
    return RegexFeedParser(rng=random.Random(42), clock=lambda: "2026-01-01T00:00:00.000Z")


def _parse(parser: RegexFeedParser, markup: str) -> list[dict]:
    return parser.parse(markup, category="industry_news", source="TechCrunch")


class TestItemLimit:
    def test_fifteen_items_yield_first_ten_in_order(self, parser: RegexFeedParser) -> None:
        markup = rss_document(*(rss_item(index) for index in range(15)))

        records = _parse(parser, markup)

        assert len(records) == 10
        assert [record["title"] for record in records] == [f"Story {i}" for i in range(10)]
        assert records[3]["link"] == "https://techcrunch.com/story-3"
        assert records[3]["date"] == "Mon, 04 Jan 2024 10:00:00 +0000"

    def test_fewer_items_than_limit_are_all_returned(self, parser: RegexFeedParser) -> None:
        records = _parse(parser, rss_document(rss_item(1), rss_item(2)))
        assert len(records) == 2

    def test_no_items_yields_empty_list(self, parser: RegexFeedParser) -> None:
        assert _parse(parser, "<rss><channel></channel></rss>") == []

    def test_custom_limit(self) -> None:
        parser = RegexFeedParser(item_limit=3, rng=random.Random(0))
        markup = rss_document(*(rss_item(index) for index in range(8)))
        assert len(_parse(parser, markup)) == 3

    def test_items_spanning_lines_are_matched(self, parser: RegexFeedParser) -> None:
        markup = "<item>\n<title><![CDATA[Multi]]></title>\n<link>https://x.test/a</link>\n</item>"
        records = _parse(parser, markup)
        assert records[0]["title"] == "Multi"
        assert records[0]["link"] == "https://x.test/a"


class TestDescription:
    def test_long_description_is_cut_to_200_chars_plus_ellipsis(
        self, parser: RegexFeedParser
    ) -> None:
        long_text = "x" * 150 + "y" * 150
        records = _parse(parser, rss_document(rss_item(1, description=long_text)))

        content = records[0]["content"]
        assert content == long_text[:200] + "..."
        assert len(content) == 203

    def test_short_description_still_gets_ellipsis(self, parser: RegexFeedParser) -> None:
        records = _parse(parser, rss_document(rss_item(1, description="Short")))
        assert records[0]["content"] == "Short..."

    def test_cut_ignores_sentence_boundaries(self, parser: RegexFeedParser) -> None:
        text = ("Sentence one. " * 20).strip()
        records = _parse(parser, rss_document(rss_item(1, description=text)))
        assert records[0]["content"] == text[:200] + "..."


class TestDefaults:
    def test_missing_fields_take_placeholders(self, parser: RegexFeedParser) -> None:
        records = _parse(parser, "<item><guid>1</guid></item>")

        assert records == [
            {
                "title": DEFAULT_TITLE,
                "content": DEFAULT_DESCRIPTION,
                "link": "",
                "date": "2026-01-01T00:00:00.000Z",
                "category": "industry_news",
                "source": "TechCrunch",
                "relevance_score": records[0]["relevance_score"],
            }
        ]

    def test_plain_title_without_cdata_is_not_found(self, parser: RegexFeedParser) -> None:
        records = _parse(parser, "<item><title>Plain</title></item>")
        assert records[0]["title"] == "No title"

    def test_default_clock_is_iso_utc_with_millis(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())


class TestRelevanceScore:
    def test_scores_are_integers_in_range(self) -> None:
        parser = RegexFeedParser(rng=random.Random(99))
        records = _parse(parser, rss_document(*(rss_item(index) for index in range(10))))

        for record in records:
            assert isinstance(record["relevance_score"], int)
            assert 0 <= record["relevance_score"] < 100

    def test_seeded_rng_makes_scores_reproducible(self) -> None:
        markup = rss_document(*(rss_item(index) for index in range(5)))
        first = _parse(RegexFeedParser(rng=random.Random(7)), markup)
        second = _parse(RegexFeedParser(rng=random.Random(7)), markup)

        assert [r["relevance_score"] for r in first] == [r["relevance_score"] for r in second]

    def test_records_are_stamped_with_template_metadata(self) -> None:
        parser = RegexFeedParser(rng=random.Random(1))
        records = parser.parse(rss_document(rss_item(1)), category="startup_news", source="HN")
        assert records[0]["category"] == "startup_news"
        assert records[0]["source"] == "HN"
