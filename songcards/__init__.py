"""
Song Card Builder Library

Core modules for turning a YouTube playlist into year-tagged music trivia cards.
"""

__version__ = "1.0.0"
__author__ = "Song Card Builder Contributors"

from .config_manager import Config
from .models import Entry, RecordingMatch, Song
from .musicbrainz_client import MusicBrainzClient
from .text_utils import normalize

__all__ = ['Config', 'Entry', 'RecordingMatch', 'Song', 'MusicBrainzClient', 'normalize']
