#!/usr/bin/env python3
"""
Seed script to populate the gallery through the HTTP API.

Run:
    python seed/seed_photos.py \
      --base-url http://localhost:3001 \
      --dir seed/photos
"""

import argparse
import mimetypes
import sys
from pathlib import Path
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")

DEFAULT_BASE_URL = "http://localhost:3001"
PHOTO_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed photos via the Photo Gallery API")

    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Server base URL",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=Path(__file__).parent / "photos",
        help="Directory holding the photos to upload",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Upload at most this many photos",
    )

    return parser.parse_args()


def find_photos(directory: Path) -> list[Path]:
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in PHOTO_SUFFIXES
    )


def seed_photos() -> None:
    try:
        args = parse_args()
        upload_url = f"{args.base_url.rstrip('/')}/api/photos"

        if not args.dir.is_dir():
            logger.error("Photo directory not found", extra={"path": str(args.dir)})
            sys.exit(1)

        photos = find_photos(args.dir)[: args.limit]

        logger.info(
            "Starting seeding process",
            extra={"upload_url": upload_url, "count": len(photos)},
        )

        for photo_path in photos:
            content_type = mimetypes.guess_type(photo_path.name)[0] or "image/jpeg"

            with open(photo_path, "rb") as f:
                response = requests.post(
                    upload_url,
                    files={"photo": (photo_path.name, f, content_type)},
                    timeout=30,
                )

            response_json = cast(dict[str, Any], response.json())

            if response.ok:
                logger.info(
                    "Seeded photo",
                    extra={"file": photo_path.name, "photo_name": response_json.get("name")},
                )
            else:
                logger.error(
                    "Failed to seed photo",
                    extra={
                        "file": photo_path.name,
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        logger.info("Seeding completed")

        list_response = requests.get(upload_url, timeout=30)

        logger.info(
            "List photos response",
            extra={
                "status": list_response.status_code,
                "count": len(list_response.json()) if list_response.ok else None,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_photos()
