"""Parse order text from the command line and print the result as JSON.

Usage:
    python scripts/parse_order.py "1k instagram followers @username"
    python scripts/parse_order.py --profile compact "500 likes tiktok"
    cat inputs.txt | python scripts/parse_order.py
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import structlog  # noqa: E402

from core.config import get_settings  # noqa: E402
from core.logging import configure_logging  # noqa: E402
from core.service_factory import get_order_parser  # noqa: E402
from services.order_parser.parser import OrderParser  # noqa: E402

log = structlog.get_logger()


def render(text: str, parser: OrderParser, threshold: int) -> dict[str, Any]:
    """ParsedOrder record plus display names and the preview gate."""
    parsed = parser.parse(text)
    record = parsed.to_dict()
    record["platformName"] = parser.get_platform_display_name(parsed.platform) if parsed.platform else None
    record["serviceTypeName"] = (
        parser.get_service_type_display_name(parsed.service_type) if parsed.service_type else None
    )
    record["showPreview"] = parsed.match_percentage >= threshold
    return record


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    arg_parser = argparse.ArgumentParser(description="Extract order intent from free text")
    arg_parser.add_argument("text", nargs="*", help="Inputs to parse (stdin lines when omitted)")
    arg_parser.add_argument("--profile", choices=["full", "compact"], default=settings.keyword_profile)
    arg_parser.add_argument(
        "--threshold", type=int, choices=range(0, 101), metavar="0-100", default=settings.preview_threshold
    )
    args = arg_parser.parse_args(argv)

    # stdout is reserved for the JSON records
    configure_logging(settings.log_level, json_output=settings.log_json, stream=sys.stderr)

    parser = get_order_parser(args.profile)
    inputs = args.text or [line.rstrip("\n") for line in sys.stdin]
    log.debug("parse_order_cli", profile=args.profile, inputs=len(inputs))

    for text in inputs:
        print(json.dumps(render(text, parser, args.threshold), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
