"""
Tests for the YouTube playlist feed client.
"""
import re

import pytest
import responses

from songcards.exceptions import SourceFeedError
from songcards.youtube_client import YouTubeClient, item_to_entry, parse_published_year

PLAYLIST_URL = re.compile(r'https://youtube.googleapis.com/youtube/v3/playlistItems.*')


def _item(video_id, title, channel="Channel", published="2019-03-04T10:00:00Z"):
    details = {"videoId": video_id}
    if published:
        details["videoPublishedAt"] = published
    return {
        "snippet": {"title": title, "videoOwnerChannelTitle": channel},
        "contentDetails": details,
    }


class TestItemToEntry:

    @pytest.mark.unit
    def test_maps_fields(self):
        entry = item_to_entry(_item("abc", "Artist - Song", "Artist - Topic", "2011-07-01T00:00:00Z"))
        assert entry.id == "abc"
        assert entry.raw_title == "Artist - Song"
        assert entry.channel_name == "Artist - Topic"
        assert entry.published_year == 2011

    @pytest.mark.unit
    def test_unavailable_video_skipped(self):
        assert item_to_entry(_item("gone", "Private video", published=None)) is None

    @pytest.mark.unit
    def test_parse_published_year(self):
        assert parse_published_year("2020-01-31T23:59:59Z") == 2020


class TestFetchPlaylist:

    @pytest.mark.unit
    @responses.activate
    def test_follows_page_tokens(self):
        responses.add(responses.GET, PLAYLIST_URL, json={
            "items": [_item("v1", "A - One"), _item("v2", "B - Two")],
            "nextPageToken": "PAGE2",
        }, status=200)
        responses.add(responses.GET, PLAYLIST_URL, json={
            "items": [_item("v3", "C - Three"), _item("v4", "Deleted video", published=None)],
        }, status=200)

        entries = YouTubeClient("KEY").fetch_playlist_entries("PL123")

        assert [e.id for e in entries] == ["v1", "v2", "v3"]
        assert len(responses.calls) == 2
        assert "pageToken=PAGE2" in responses.calls[1].request.url
        assert "pageToken" not in responses.calls[0].request.url

    @pytest.mark.unit
    @responses.activate
    def test_malformed_continuation_token_is_fatal(self):
        responses.add(responses.GET, PLAYLIST_URL, json={"items": [], "nextPageToken": 42}, status=200)
        with pytest.raises(SourceFeedError):
            YouTubeClient("KEY").fetch_playlist_items("PL123")

    @pytest.mark.unit
    @responses.activate
    def test_http_error_is_fatal(self):
        responses.add(responses.GET, PLAYLIST_URL, json={"message": "forbidden"}, status=403)
        with pytest.raises(SourceFeedError):
            YouTubeClient("KEY").fetch_playlist_items("PL123")

    @pytest.mark.unit
    @responses.activate
    def test_error_body_is_fatal(self):
        responses.add(responses.GET, PLAYLIST_URL, json={"error": {"code": 400}}, status=200)
        with pytest.raises(SourceFeedError):
            YouTubeClient("KEY").fetch_playlist_items("PL123")
