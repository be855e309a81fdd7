# yt_export/models.py
"""
Typed records decoded from YouTube Data API search responses.

Optional fields are defaulted here, once, so the rest of the package never
has to guard individual lookups.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .utils import _deep_get


def _as_str(value) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class VideoItem:
    """One entry from the `items` array of a search response."""

    video_id: Optional[str] = None
    title: str = ""
    description: str = ""
    published_at: str = ""

    @classmethod
    def from_search_item(cls, item: dict) -> "VideoItem":
        video_id = _deep_get(item, "id.videoId")
        return cls(
            video_id=video_id if isinstance(video_id, str) else None,
            title=_as_str(_deep_get(item, "snippet.title")),
            description=_as_str(_deep_get(item, "snippet.description")),
            published_at=_as_str(_deep_get(item, "snippet.publishedAt")),
        )

    def as_row(self) -> List[str]:
        return [self.video_id or "", self.title, self.description, self.published_at]


@dataclass
class SearchPage:
    """A single decoded page of search results."""

    items: List[VideoItem] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @classmethod
    def from_response(cls, data: dict) -> "SearchPage":
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raw_items = []
        token = data.get("nextPageToken")
        return cls(
            items=[VideoItem.from_search_item(item) for item in raw_items],
            next_page_token=token if isinstance(token, str) and token else None,
        )
