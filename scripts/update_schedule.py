#!/usr/bin/env python3
"""
Standalone job that fetches the team schedule and rewrites the HTML page.

Intended for scheduled runs (e.g., GitHub Actions cron) so the page can stay
completely static. A failed fetch leaves the previous page in place.
"""

import argparse
import json
import logging
from pathlib import Path

from schedule_board import DisplayConfig, generate_html

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    config = DisplayConfig.from_settings()
    parser = argparse.ArgumentParser(description="Fetch the team schedule and write the HTML page.")
    parser.add_argument(
        "--output",
        default=config.output_path,
        help=f"Path to write the schedule page (default: {config.output_path}).",
    )
    parser.add_argument(
        "--snapshot-json",
        default=None,
        help="Optional path to also write the fetched snapshot as JSON.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    snapshot = generate_html(output_path=output_path)
    if snapshot is None or not args.snapshot_json:
        return

    json_path = Path(args.snapshot_json)
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as handle:
        json.dump(snapshot.as_dict(), handle, indent=2)
        handle.write("\n")

    logger.info("Snapshot written to %s", json_path)


if __name__ == "__main__":
    main()
