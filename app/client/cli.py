"""Command-line client: preview a photo, upload it and print the fortune."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.client.fortune_client import FortuneClient, FortuneClientError
from app.client.result_renderer import format_result
from app.services.photo_inspector import describe_photo, inspect_photo

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fortune-teller",
        description="上传您的照片，让AI为您解读面相",
    )
    parser.add_argument("photo", type=Path, help="Path to the photo to upload")
    parser.add_argument("--api-url", default=None, help="API base URL (default: $FORTUNE_API_URL)")
    parser.add_argument("--timeout", type=float, default=None, help="Upload timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
    )

    client = FortuneClient(api_url=args.api_url, timeout=args.timeout)

    try:
        client.check_photo(args.photo)
        print(f"预览: {args.photo.name} ({describe_photo(inspect_photo(args.photo))})")
        result = client.upload(args.photo)
    except FortuneClientError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
