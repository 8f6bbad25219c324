"""
Container health check that also verifies the store counters are reported.
"""

from __future__ import annotations

import os

import requests

EXPECTED_COUNTS = ("intelligence", "companies", "deals")


def main() -> int:
    port = os.getenv("PORT", "3000")
    path = os.getenv("HEALTHCHECK_PATH", "/health")
    url = f"http://127.0.0.1:{port}{path}"

    try:
        response = requests.get(url, timeout=2)
        payload = response.json()
    except (requests.RequestException, ValueError):
        return 1

    if not response.ok or payload.get("status") != "ok":
        return 1
    counts = payload.get("data_counts") or {}
    return 0 if all(key in counts for key in EXPECTED_COUNTS) else 1


if __name__ == "__main__":
    raise SystemExit(main())
