"""
Run one template collection from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from app.collection import CollectionFailedError, TemplateNotFoundError
from app.context import build_app_context


def _parse_param(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{raw}'.")
    key, value = raw.split("=", 1)
    return key.strip(), value.strip()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a collection template once.")
    parser.add_argument("template", nargs="?", help="Registered template name.")
    parser.add_argument(
        "--param",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        help="Template parameter as KEY=VALUE; repeatable.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the registered templates and exit.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    context = build_app_context()

    if args.list or not args.template:
        print(json.dumps(context.registry.as_dict(), indent=2))
        return 0

    try:
        result = context.engine.collect(args.template, dict(args.params))
    except TemplateNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except CollectionFailedError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    payload = {
        "template": result.template_name,
        "items": result.item_count,
        "stored": result.stored,
        "data": result.data,
    }
    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
