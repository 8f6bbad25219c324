"""
Parsers for collected source documents.
"""

from app.collection.parsing.feed import FeedParser, RegexFeedParser, utc_now_iso
from app.collection.parsing.html import SelectorExtractor

__all__ = ["FeedParser", "RegexFeedParser", "SelectorExtractor", "utc_now_iso"]
