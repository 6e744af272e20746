"""
Pytest fixtures for song-card-builder tests

Provides common test data and fake collaborators for use across all test modules.
"""
import sys
from pathlib import Path

import pytest

# allow importing from repo
sys.path.insert(0, str(Path(__file__).parent.parent))

from songcards.exceptions import NotFoundError
from songcards.models import Entry, RecordingMatch, Song


class FakeResolver:
    """Stands in for MusicBrainzClient: answers from a dict keyed by (artist, title)."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.calls = []

    def resolve(self, artist, title):
        self.calls.append((artist, title))
        answer = self.answers.get((artist, title))
        if answer is None:
            raise NotFoundError(f"No dated recording found for {artist} - {title}")
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_resolver():
    return FakeResolver


@pytest.fixture
def make_song():
    def _make(artist="Artist", title="Title", year=2020, fallback=2020, source_id="vid", raw_title=None,
              matched_title=None):
        return Song(
            artist=artist,
            title=title,
            release_year=year,
            fallback_year=fallback,
            source_id=source_id,
            raw_title=raw_title if raw_title is not None else f"{artist} - {title}",
            matched_title=matched_title,
        )
    return _make


@pytest.fixture
def sample_entries():
    """Three playlist entries: two resolvable, one not."""
    return [
        Entry(id="vid-1", raw_title="Daft Punk - One More Time (Official Video)", channel_name="Daft Punk", published_year=2014),
        Entry(id="vid-2", raw_title="Obscure Bootleg [HD]", channel_name="Nobody Knows - Topic", published_year=2019),
        Entry(id="vid-3", raw_title="Bohemian Rhapsody (Remastered 2011)", channel_name="Queen - Topic", published_year=2015),
    ]


@pytest.fixture
def sample_answers():
    return {
        ("Daft Punk", "One More Time"): [RecordingMatch(2000, "Daft Punk - One More Time")],
        ("Queen", "Bohemian Rhapsody"): [RecordingMatch(1975, "Queen - Bohemian Rhapsody")],
    }


@pytest.fixture
def mock_musicbrainz_recording_response():
    """Mock MusicBrainz recording search API response."""
    return {
        "created": "2024-01-01T00:00:00.000Z",
        "count": 5,
        "offset": 0,
        "recordings": [
            {
                "id": "rec-live",
                "score": 100,
                "title": "One More Time",
                "first-release-date": "2001-03-12",
                "disambiguation": "live",
                "artist-credit": [{"name": "Daft Punk", "artist": {"id": "a1", "name": "Daft Punk"}}],
            },
            {
                "id": "rec-undated",
                "score": 95,
                "title": "One More Time",
                "first-release-date": None,
                "artist-credit": [{"name": "Daft Punk"}],
            },
            {
                "id": "rec-radio",
                "score": 95,
                "title": "One More Time (radio edit)",
                "first-release-date": "2000-11-13",
                "artist-credit": [{"name": "Daft Punk"}],
            },
            {
                "id": "rec-album",
                "score": 90,
                "title": "One More Time",
                "first-release-date": "2000",
                "artist-credit": [{"name": "Daft Punk"}, {"name": "Romanthony"}],
            },
            {
                "id": "rec-missing-date",
                "score": 80,
                "title": "One More Time",
                "artist-credit": [{"name": "Daft Punk"}],
            },
        ],
    }
