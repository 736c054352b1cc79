#!/usr/bin/env python3
"""
Run a single accessibility scan from the command line and print the JSON result.

Usage:
    python scripts/run_scan.py https://example.com [--provider lighthouse]

Exit codes: 0 live result, 1 invalid URL, 2 demo data (upstream failed).
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.features.scan.dependencies.provider import build_provider  # noqa: E402
from app.features.scan.services.scan.scan import ScanService  # noqa: E402
from app.platform.config import settings  # noqa: E402
from app.platform.utils.url_validator import validate_url  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Scan a page for accessibility issues")
    parser.add_argument("url", type=str, help="Page to scan (http:// or https://)")
    parser.add_argument(
        "--provider",
        choices=["pagespeed", "lighthouse"],
        default=settings.SCAN_PROVIDER,
        help="Where the Lighthouse report comes from (default: %(default)s)",
    )

    args = parser.parse_args()

    is_valid, url, error_message = validate_url(args.url)
    if not is_valid:
        print(json.dumps({"error": error_message}), file=sys.stderr)
        sys.exit(1)

    result = asyncio.run(ScanService(build_provider(args.provider)).scan(url))
    print(result.model_dump_json(by_alias=True, indent=2))

    if getattr(result, "warning", None):
        sys.exit(2)


if __name__ == "__main__":
    main()
