"""
YouTube Playlist Client

Fetches every item of a playlist through the YouTube Data API v3, following
the page tokens until the last page, and turns each item into an Entry.
"""

import logging
from typing import Optional, Dict, Any, List

import requests

from .exceptions import SourceFeedError
from .models import Entry

logger = logging.getLogger(__name__)


def parse_published_year(published_at: str) -> int:
    """Year of an ISO 8601 publish timestamp ("2019-03-04T12:00:00Z" -> 2019)."""
    return int(published_at.split('-', 1)[0])


def item_to_entry(item: Dict[str, Any]) -> Optional[Entry]:
    """
    Convert one playlistItems resource into an Entry.

    Returns None for items YouTube no longer exposes (deleted or private
    videos have no publish date and a placeholder title).
    """
    snippet = item.get('snippet') or {}
    details = item.get('contentDetails') or {}
    video_id = details.get('videoId') or (snippet.get('resourceId') or {}).get('videoId')
    raw_title = snippet.get('title')
    published_at = details.get('videoPublishedAt')

    if not video_id or not raw_title or not published_at:
        logger.warning(f"Skipping unavailable playlist item: {raw_title or video_id or '<unknown>'}")
        return None

    try:
        published_year = parse_published_year(published_at)
    except ValueError:
        logger.warning(f"Skipping '{raw_title}': unparseable publish date {published_at!r}")
        return None

    return Entry(
        id=video_id,
        raw_title=raw_title,
        channel_name=snippet.get('videoOwnerChannelTitle') or '',
        published_year=published_year,
    )


class YouTubeClient:
    """
    Client for the YouTube Data API playlistItems endpoint.

    Args:
        api_key: YouTube Data API key
        timeout: Request timeout in seconds (default: 30)
        page_size: Items per page, at most 50
    """

    def __init__(self, api_key: str, timeout: int = 30, page_size: int = 50):
        self.base_url = "https://youtube.googleapis.com/youtube/v3"
        self.api_key = api_key
        self.timeout = timeout
        self.page_size = min(page_size, 50)
        self.session = requests.Session()

        logger.debug("YouTubeClient initialized")

    def _get_page(self, playlist_id: str, page_token: Optional[str]) -> Dict[str, Any]:
        params = {
            'part': 'snippet,contentDetails',
            'maxResults': str(self.page_size),
            'playlistId': playlist_id,
            'key': self.api_key,
        }
        if page_token:
            params['pageToken'] = page_token

        try:
            response = self.session.get(f"{self.base_url}/playlistItems", params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SourceFeedError(f"YouTube request failed: {e}")

        if not 200 <= response.status_code < 300:
            logger.debug(f"YouTube error {response.status_code}: {response.text[:200]}")
            raise SourceFeedError(f"YouTube request failed with status {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            raise SourceFeedError("YouTube returned a body that is not JSON")

        if body.get('error'):
            raise SourceFeedError(f"YouTube returned an error: {body['error']}")
        return body

    def fetch_playlist_items(self, playlist_id: str) -> List[Dict[str, Any]]:
        """Return the raw items of every page of the playlist, in playlist order."""
        items: List[Dict[str, Any]] = []
        page_token = None
        while True:
            body = self._get_page(playlist_id, page_token)
            items.extend(body.get('items') or [])

            if 'nextPageToken' not in body:
                break
            page_token = body['nextPageToken']
            if not isinstance(page_token, str) or not page_token:
                raise SourceFeedError(f"Malformed continuation token: {page_token!r}")
            logger.debug(f"Fetched {len(items)} playlist items, continuing")

        logger.info(f"Fetched {len(items)} playlist items")
        return items

    def fetch_playlist_entries(self, playlist_id: str) -> List[Entry]:
        """Fetch the playlist and convert its items to entries, skipping unavailable videos."""
        entries = []
        for item in self.fetch_playlist_items(playlist_id):
            entry = item_to_entry(item)
            if entry is not None:
                entries.append(entry)
        return entries
