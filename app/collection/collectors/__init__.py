"""
Collector exports.
"""

from app.collection.collectors.api_collector import ApiCollector
from app.collection.collectors.base import Collector
from app.collection.collectors.crawler_collector import CrawlerCollector
from app.collection.collectors.registry import CollectorRegistry

__all__ = ["ApiCollector", "Collector", "CollectorRegistry", "CrawlerCollector"]
