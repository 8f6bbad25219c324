"""
Shared fixtures: an offline requests session and RSS markup builders.
"""

from __future__ import annotations

import random
from typing import Any

import pytest
import requests

from app.collection import TemplateRegistry
from app.config import CollectionSettings
from app.context import AppContext, build_app_context


def make_response(
    url: str,
    body: str,
    *,
    status_code: int = 200,
    content_type: str = "text/html; charset=utf-8",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.headers["content-type"] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    response.url = url
    return response


class FakeSession:
    """
    Stand-in for `requests.Session` serving canned responses by URL.
    """

    def __init__(self) -> None:
        self.routes: dict[str, requests.Response | Exception] = {}
        self.calls: list[dict[str, Any]] = []

    def add(self, url: str, body: str, **kwargs: Any) -> None:
        self.routes[url] = make_response(url, body, **kwargs)

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        outcome = self.routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def rss_item(index: int, *, description: str | None = None) -> str:
    text = description if description is not None else f"Story {index} body"
    return (
        "<item>"
        f"<title><![CDATA[Story {index}]]></title>"
        f"<link>https://techcrunch.com/story-{index}</link>"
        f"<pubDate>Mon, 0{index % 9 + 1} Jan 2024 10:00:00 +0000</pubDate>"
        f"<description><![CDATA[{text}]]></description>"
        "</item>"
    )


def rss_document(*items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<rss version=\"2.0\"><channel><title>TechCrunch</title>\n"
        + "\n".join(items)
        + "\n</channel></rss>"
    )


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def settings() -> CollectionSettings:
    return CollectionSettings()


@pytest.fixture()
def context(session: FakeSession, settings: CollectionSettings) -> AppContext:
    return build_app_context(
        settings=settings,
        registry=TemplateRegistry(),
        session=session,  # type: ignore[arg-type]
        rng=random.Random(1234),
    )
