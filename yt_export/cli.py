# yt_export/cli.py

import argparse
import logging
import sys
from typing import List, Optional

from . import constants as const
from .client import YtExport
from .config import load_settings
from .exceptions import ConfigurationError, HttpStatusError, YtExportError
from .exporter import write_to_csv

logger = logging.getLogger(__name__)

EXIT_OK = 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-export",
        description="Export every video of a YouTube channel to a CSV file.",
    )
    parser.add_argument("--channel-id", default=const.DEFAULT_CHANNEL_ID, help="Channel ID to search.")
    parser.add_argument("--output", default=const.DEFAULT_OUTPUT_PATH, help="Path of the CSV file to write.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=const.DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _report(prefix: str, error: YtExportError) -> int:
    print(f"{prefix}: {error}")
    if isinstance(error, HttpStatusError):
        print(f"HTTP Status {error.status_code}")
        if error.body:
            print(f"Response body: {error.body}")
    return error.exit_code


def run(argv: Optional[List[str]] = None) -> int:
    """Runs one export and returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = load_settings(
            channel_id=args.channel_id,
            output_path=args.output,
            timeout=args.timeout,
        )
    except ConfigurationError as e:
        return _report("Configuration error", e)

    logger.info("Starting export for channel: %s", settings.channel_id)
    with YtExport(settings.api_key, timeout=settings.timeout) as client:
        try:
            videos = client.get_channel_videos(settings.channel_id)
        except YtExportError as e:
            return _report("Error fetching videos", e)

    print(f"Fetched {len(videos)} videos")
    if not videos:
        print("No videos found")
        return EXIT_OK

    try:
        path = write_to_csv(videos, settings.output_path)
    except YtExportError as e:
        return _report("Error writing CSV", e)

    print(f"Videos written to {path}")
    return EXIT_OK


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
