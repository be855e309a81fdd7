# yt_export/__init__.py

from .client import YtExport
from .exceptions import (
    ApiResponseError,
    ConfigurationError,
    ErrorKind,
    ExportError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
    YtExportError,
)
from .exporter import write_to_csv
from .fetcher import SearchFetcher, fetch_videos
from .models import SearchPage, VideoItem

__version__ = "0.1.0"

__all__ = [
    "YtExport",
    "SearchFetcher",
    "fetch_videos",
    "write_to_csv",
    "VideoItem",
    "SearchPage",
    "ErrorKind",
    "YtExportError",
    "ConfigurationError",
    "TransportError",
    "HttpStatusError",
    "ApiResponseError",
    "MalformedResponseError",
    "ExportError",
]
