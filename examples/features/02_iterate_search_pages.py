# examples/features/02_iterate_search_pages.py
import itertools
import os

from yt_export import YtExport

client = YtExport(os.environ["YOUTUBE_API_KEY"])
channel_id = "UCBRxDSTfr2aJVODDh4WG_7g"

# iter_channel_pages is a generator: each page is requested only when the
# loop asks for it, so islice keeps the quota cost down to two requests.
print(f"Fetching the first two pages for: {channel_id}\n")
with client:
    for number, page in enumerate(itertools.islice(client.iter_channel_pages(channel_id), 2), start=1):
        print(f"--- Page {number} ({len(page.items)} videos) ---")
        for video in page.items:
            print(f"- {video.published_at}  {video.video_id}  {video.title}")
        print()
