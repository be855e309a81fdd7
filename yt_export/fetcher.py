# yt_export/fetcher.py

import json
import logging
from collections.abc import Iterator
from typing import List, Optional

import httpx

from . import constants as const
from .exceptions import (
    ApiResponseError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
    YtExportError,
)
from .models import SearchPage, VideoItem

logger = logging.getLogger(__name__)


def _describe_api_error(error) -> str:
    if isinstance(error, dict):
        code = error.get("code")
        message = error.get("message")
        if code is not None and message:
            return f"{code}: {message}"
        if message:
            return str(message)
    return json.dumps(error, default=str)


class SearchFetcher:
    """
    Pages through the YouTube Data API `search` endpoint for one channel.

    Each page is requested once. There is no retry: any failure aborts the
    whole fetch and is raised as a `YtExportError` subclass.
    """

    def __init__(self, session: httpx.Client, api_key: str, timeout: float = const.DEFAULT_TIMEOUT):
        self.session = session
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logger

    def build_params(self, channel_id: str, page_token: str = "") -> dict:
        return {
            "key": self.api_key,
            "channelId": channel_id,
            **const.SEARCH_PARAMS,
            "pageToken": page_token,
        }

    def get_page(self, channel_id: str, page_token: str = "", page: int = 1) -> SearchPage:
        """
        Requests and decodes a single page of search results.

        Raises:
            TransportError: The request could not be completed.
            HttpStatusError: The endpoint answered with a non-2xx status.
            MalformedResponseError: The body is not a JSON object.
            ApiResponseError: The body carries an `error` object.
        """
        params = self.build_params(channel_id, page_token)
        self.logger.debug(
            "Search request params: %s",
            {k: v for k, v in params.items() if k != "key"},
        )

        try:
            response = self.session.get(const.SEARCH_URL, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            self.logger.error(f"Request failed for search page {page}: {e}")
            raise TransportError(
                f"Search request failed: {e}", channel_id=channel_id, page=page
            ) from e

        if not response.is_success:
            body = response.text
            self.logger.error(f"API request failed with status: {response.status_code}")
            self.logger.error(f"Response body: {body}")
            raise HttpStatusError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                body=body,
                channel_id=channel_id,
                page=page,
            )

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Could not decode search page {page} as JSON: {e}")
            raise MalformedResponseError(
                f"Response body is not valid JSON: {e}", channel_id=channel_id, page=page
            ) from e

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(data).__name__}",
                payload=data,
                channel_id=channel_id,
                page=page,
            )

        if "error" in data:
            error = data["error"]
            self.logger.error(f"API returned an error: {error!r}")
            raise ApiResponseError(
                f"API returned an error: {_describe_api_error(error)}",
                payload=error,
                channel_id=channel_id,
                page=page,
            )

        return SearchPage.from_response(data)

    def iter_pages(self, channel_id: str) -> Iterator[SearchPage]:
        """
        A generator that yields every page of results for `channel_id`.

        Pagination follows `nextPageToken` and stops only when a page comes
        back without one. Pages with no `items` are still yielded.
        """
        page_token = ""
        page = 1
        while True:
            self.logger.info(f"Fetching search page {page} for channel: {channel_id}")
            search_page = self.get_page(channel_id, page_token, page=page)
            yield search_page

            if search_page.next_page_token is None:
                self.logger.info("No nextPageToken returned. Terminating fetch loop.")
                break

            page_token = search_page.next_page_token
            page += 1

    def fetch_videos(self, channel_id: str) -> List[VideoItem]:
        """
        Fetches every video on the channel, in the order the API returns them.

        Nothing is returned on failure: videos gathered from earlier pages
        are dropped and the error is re-raised.
        """
        videos: List[VideoItem] = []
        try:
            for search_page in self.iter_pages(channel_id):
                videos.extend(search_page.items)
                self.logger.info(f"Collected {len(videos)} videos so far.")
        except YtExportError:
            if videos:
                self.logger.warning(f"Discarding {len(videos)} videos fetched before the failure.")
            raise
        return videos


def fetch_videos(
    api_key: str,
    channel_id: str = const.DEFAULT_CHANNEL_ID,
    session: Optional[httpx.Client] = None,
    timeout: float = const.DEFAULT_TIMEOUT,
) -> List[VideoItem]:
    """
    Fetches all videos for a channel using a one-off session unless one is given.

    Args:
        api_key: A YouTube Data API key.
        channel_id: The channel to search.
        session: An existing `httpx.Client` to reuse. It is left open.
        timeout: Per-request timeout in seconds.

    Returns:
        The ordered list of `VideoItem` records, possibly empty.
    """
    if session is not None:
        return SearchFetcher(session, api_key, timeout).fetch_videos(channel_id)

    with httpx.Client(headers={"User-Agent": const.USER_AGENT}) as own_session:
        return SearchFetcher(own_session, api_key, timeout).fetch_videos(channel_id)
