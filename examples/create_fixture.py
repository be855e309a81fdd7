import json
import os
from pathlib import Path

import httpx

from yt_export import constants as const
from yt_export.fetcher import SearchFetcher


def create_fixture_from_live_data():
    """
    Fetches the first page of search results for the default channel and
    saves the raw JSON response to a fixture file, with the API key left out.
    """
    api_key = os.environ["YOUTUBE_API_KEY"]
    print(f"Fetching live search page for {const.DEFAULT_CHANNEL_ID}...")
    with httpx.Client() as session:
        fetcher = SearchFetcher(session, api_key)
        params = fetcher.build_params(const.DEFAULT_CHANNEL_ID)
        response = session.get(const.SEARCH_URL, params=params, timeout=const.DEFAULT_TIMEOUT)
        response.raise_for_status()
        data = response.json()

    fixtures_dir = Path("tests/fixtures")
    fixtures_dir.mkdir(exist_ok=True)
    output_path = fixtures_dir / "live_search_page.json"

    print(f"Saving response to {output_path}...")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print("Fixture created successfully.")


if __name__ == "__main__":
    create_fixture_from_live_data()
