"""
Base collector abstraction for template-driven collection.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from app.collection.fetcher import SourceFetcher
from app.collection.logging_utils import log_event

logger = logging.getLogger(__name__)

TemplateT = TypeVar("TemplateT")


class Collector(ABC, Generic[TemplateT]):
    """
    Runs one template against caller params.

    `collect` never raises: any failure is logged and reported as `None`.
    """

    def __init__(self, *, fetcher: SourceFetcher) -> None:
        self.fetcher = fetcher

    def collect(self, template: TemplateT, params: dict[str, Any]) -> Any | None:
        try:
            return self.fetch_and_extract(template, params)
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "collection_failed",
                collector=type(self).__name__,
                error=str(exc),
            )
            return None

    @abstractmethod
    def fetch_and_extract(self, template: TemplateT, params: dict[str, Any]) -> Any:
        """
        Fetch the template's source and return the extracted payload.
        """
