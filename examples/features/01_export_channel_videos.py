# examples/features/01_export_channel_videos.py
import logging
import os

from yt_export import YtExport

logging.basicConfig(level=logging.INFO)

# --- 1. Initialize the client ---
# The key comes from the environment; see README for how to get one.
client = YtExport(os.environ["YOUTUBE_API_KEY"])

# --- 2. Define the channel ID ---
channel_id = "UCBRxDSTfr2aJVODDh4WG_7g"

# --- 3. Fetch and write the CSV ---
# The file is only created when the channel has at least one video.
with client:
    count = client.export_channel(channel_id, "channel_videos.csv")

print(f"Exported {count} videos to channel_videos.csv")
