"""
Exceptions raised by the template collection pipeline.
"""

from __future__ import annotations


class CollectionError(RuntimeError):
    """
    Base error for template collection failures.
    """


class TemplateNotFoundError(CollectionError):
    """
    Raised when a collection is requested for an unregistered template name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Template not found: {name}")
        self.name = name


class InvalidTemplateError(CollectionError):
    """
    Raised when a template payload declares an unsupported source type.
    """


class CollectionFailedError(CollectionError):
    """
    Raised when a collector produced no result for a template.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Collection failed for template: {name}")
        self.name = name


class FetchError(CollectionError):
    """
    Raised when a source URL cannot be fetched.
    """
