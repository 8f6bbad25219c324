"""
app/collection/fetcher.py

Outbound HTTP for collection sources.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from app.collection.errors import FetchError
from app.collection.logging_utils import timed_event

logger = logging.getLogger(__name__)


class SourceFetcher:
    """
    Single-attempt GET requests sent with a browser User-Agent.

    Some sources reject clients that do not look like a desktop browser.
    """

    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds
        self.request_headers = {"User-Agent": user_agent}

    def get(self, url: str, *, params: dict[str, Any] | None = None) -> requests.Response:
        """
        Fetch `url` and return the response, raising `FetchError` on any failure.
        """

        with timed_event(logger, "source_fetched", url=url) as fields:
            try:
                response = self._session.get(
                    url,
                    params=params or None,
                    headers=self.request_headers,
                    timeout=self._timeout_seconds,
                    allow_redirects=True,
                )
                response.raise_for_status()
            except requests.RequestException as exc:
                raise FetchError(f"GET {url} failed: {exc}") from exc
            fields["status_code"] = response.status_code
        return response

    def get_text(self, url: str, *, params: dict[str, Any] | None = None) -> str:
        return _decoded_text(self.get(url, params=params))

    def get_body(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        """
        Fetch `url` and decode the body: JSON whenever it parses, text otherwise.
        """

        response = self.get(url, params=params)
        text = _decoded_text(response)
        try:
            return json.loads(text)
        except ValueError:
            return text


def _decoded_text(response: requests.Response) -> str:
    # Without a declared charset requests assumes ISO-8859-1 for text/* bodies.
    content_type = (response.headers.get("content-type") or "").lower()
    if "charset" not in content_type:
        response.encoding = "utf-8"
    return response.text
