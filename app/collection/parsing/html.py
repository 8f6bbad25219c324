"""
BeautifulSoup-based field extraction for crawler templates.
"""

from __future__ import annotations

from collections.abc import Mapping

from bs4 import BeautifulSoup


class SelectorExtractor:
    """
    Extract one text field per CSS selector from an HTML document.
    """

    @staticmethod
    def extract(*, html: str, selectors: Mapping[str, str]) -> dict[str, str]:
        """
        Return the stripped text of the first match for every selector.

        A selector that matches nothing yields an empty string for its field.
        """

        soup = BeautifulSoup(html, "html.parser")
        extracted: dict[str, str] = {}
        for field_name, selector in selectors.items():
            node = soup.select_one(selector)
            extracted[field_name] = node.get_text().strip() if node is not None else ""
        return extracted
