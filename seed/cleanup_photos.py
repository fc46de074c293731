#!/usr/bin/env python3
"""
Cleanup script to remove photos through the HTTP API.

Run:
    python seed/cleanup_photos.py \
      --base-url http://localhost:3001 \
      --contains sunset
"""

import argparse
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

DEFAULT_BASE_URL = "http://localhost:3001"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup photos via the Photo Gallery API")

    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Server base URL",
    )
    parser.add_argument(
        "--contains",
        default=None,
        help="Only delete photos whose name contains this text (default: all)",
    )

    return parser.parse_args()


def cleanup_photos() -> None:
    try:
        args = parse_args()
        base_url = args.base_url.rstrip("/")

        logger.info(
            "Starting cleanup process",
            extra={"base_url": base_url, "contains": args.contains},
        )

        response = requests.get(f"{base_url}/api/photos", timeout=30)

        if not response.ok:
            logger.error(
                "Failed to list photos",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        photos = cast(list[dict[str, Any]], response.json())
        if args.contains:
            photos = [photo for photo in photos if args.contains in photo["name"]]

        if not photos:
            logger.info("No photos found for cleanup")
            return

        for photo in photos:
            # "url" is already percent-encoded by the server
            delete_resp = requests.delete(f"{base_url}{photo['url']}", timeout=30)

            if delete_resp.ok:
                logger.info("Deleted photo", extra={"photo_name": photo["name"]})
            else:
                logger.error(
                    "Failed to delete photo",
                    extra={
                        "photo_name": photo["name"],
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_photos()
