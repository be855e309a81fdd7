# yt_export/constants.py

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"

API_KEY_ENV_VAR = "YOUTUBE_API_KEY"

# Francesco Ciulla
DEFAULT_CHANNEL_ID = "UCBRxDSTfr2aJVODDh4WG_7g"
DEFAULT_OUTPUT_PATH = "francesco_ciulla_videos.csv"

DEFAULT_TIMEOUT = 10.0
MAX_RESULTS = 50

# Sent with every search request, alongside key, channelId and pageToken.
SEARCH_PARAMS = {
    "part": "snippet,id",
    "order": "date",
    "maxResults": str(MAX_RESULTS),
    "type": "video",
}

CSV_HEADER = ["Video ID", "Title", "Description", "Published At"]

USER_AGENT = "yt-export/0.1.0 (+https://developers.google.com/youtube/v3)"
