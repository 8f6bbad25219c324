"""
app/context.py

Application context shared by request handlers.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

import requests
from fastapi import Request

from app.collection import CollectionEngine, InsightStore, TemplateRegistry, build_registry
from app.collection.collectors import CollectorRegistry
from app.collection.fetcher import SourceFetcher
from app.collection.parsing import RegexFeedParser
from app.config import CollectionSettings, get_collection_settings


@dataclass
class AppContext:
    """
    Mutable process state: template registry, record store and the engine over them.
    """

    settings: CollectionSettings
    registry: TemplateRegistry
    store: InsightStore
    engine: CollectionEngine


def build_app_context(
    *,
    settings: CollectionSettings | None = None,
    registry: TemplateRegistry | None = None,
    session: requests.Session | None = None,
    rng: random.Random | None = None,
) -> AppContext:
    """
    Wire registry, store, fetcher and collectors into one context.

    Tests pass a fake `session` and a seeded `rng` to stay offline and deterministic.
    """

    settings = settings or get_collection_settings()
    if registry is None:
        registry = build_registry(config_path=settings.templates_config_path)
    store = InsightStore()
    fetcher = SourceFetcher(
        user_agent=settings.user_agent,
        timeout_seconds=settings.timeout_seconds,
        session=session,
    )
    feed_parser = RegexFeedParser(
        item_limit=settings.feed_item_limit,
        description_max_chars=settings.description_max_chars,
        rng=rng,
    )
    engine = CollectionEngine(
        registry=registry,
        collectors=CollectorRegistry.default(fetcher=fetcher, feed_parser=feed_parser),
        store=store,
    )
    return AppContext(settings=settings, registry=registry, store=store, engine=engine)


def get_app_context(request: Request) -> AppContext:
    """
    FastAPI dependency returning the context attached by `create_app`.
    """

    return request.app.state.context
