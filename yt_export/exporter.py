# yt_export/exporter.py

import csv
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from .constants import CSV_HEADER, DEFAULT_OUTPUT_PATH
from .exceptions import ExportError
from .models import VideoItem

logger = logging.getLogger(__name__)


def write_to_csv(
    videos: Iterable[Union[VideoItem, dict]],
    path: Union[str, Path] = DEFAULT_OUTPUT_PATH,
) -> Path:
    """
    Writes videos to a UTF-8 CSV file, replacing any existing file.

    Raw search result dicts are accepted too and decoded the same way the
    fetcher decodes them. Rows written before a failure are left on disk.

    Returns:
        The path that was written.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    path = Path(path)
    rows = 0
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for video in videos:
                if not isinstance(video, VideoItem):
                    video = VideoItem.from_search_item(video)
                writer.writerow(video.as_row())
                rows += 1
    except OSError as e:
        logger.error(f"Failed to write CSV file {path} after {rows} rows: {e}")
        raise ExportError(f"Could not write {path}: {e}", path=path) from e

    logger.info(f"Wrote {rows} videos to {path}")
    return path
