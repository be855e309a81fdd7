# yt_export/client.py

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import List, Optional, Union

import httpx

from . import constants as const
from .exporter import write_to_csv
from .fetcher import SearchFetcher
from .models import SearchPage, VideoItem

logger = logging.getLogger(__name__)


class YtExport:
    """
    A client for exporting a YouTube channel's videos via the Data API.

    It owns an `httpx.Client` unless one is passed in, and can be used as a
    context manager so that session is closed when the work is done.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = const.DEFAULT_TIMEOUT,
        session: Optional[httpx.Client] = None,
    ):
        self._owns_session = session is None
        self.session = session or httpx.Client(headers={"User-Agent": const.USER_AGENT})
        self._fetcher = SearchFetcher(self.session, api_key, timeout)
        self.logger = logger

    def __enter__(self) -> "YtExport":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._owns_session:
            self.session.close()

    def iter_channel_pages(self, channel_id: str = const.DEFAULT_CHANNEL_ID) -> Iterator[SearchPage]:
        """Yields each page of search results as it arrives."""
        return self._fetcher.iter_pages(channel_id)

    def get_channel_videos(self, channel_id: str = const.DEFAULT_CHANNEL_ID) -> List[VideoItem]:
        """
        Fetches every video for a channel.

        Args:
            channel_id: The channel's ID (the `UC...` form, not a handle).

        Returns:
            A list of `VideoItem`, newest first as ordered by the API.
        """
        return self._fetcher.fetch_videos(channel_id)

    def export_channel(
        self,
        channel_id: str = const.DEFAULT_CHANNEL_ID,
        path: Union[str, Path] = const.DEFAULT_OUTPUT_PATH,
    ) -> int:
        """
        Fetches a channel's videos and writes them to `path`.

        The file is only written when at least one video was found.

        Returns:
            The number of videos fetched.
        """
        videos = self.get_channel_videos(channel_id)
        if not videos:
            self.logger.info(f"No videos found for channel {channel_id}; skipping CSV export.")
            return 0

        write_to_csv(videos, path)
        return len(videos)
