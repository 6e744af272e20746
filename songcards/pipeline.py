"""
End-to-end song resolution: normalize, look up, review, browse.

    entries -> normalize -> MusicBrainz lookup --found--> resolved
                                               --failed-> unresolved -> review
    resolved + reviewed -> browser -> sorted by release year
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from .browser import CatalogBrowser, sort_by_release_year
from .exceptions import NotFoundError, TransportFailure
from .models import Entry, Song
from .musicbrainz_client import MusicBrainzClient
from .prompt_io import PromptIO
from .review import merge_reviewed, review_unresolved
from .song_store import save_songs
from .text_utils import normalize

logger = logging.getLogger(__name__)


def build_song(entry: Entry) -> Song:
    artist, title = normalize(entry.raw_title, entry.channel_name)
    return Song.from_entry(entry, artist, title)


def resolve_song(song: Song, resolver: MusicBrainzClient) -> bool:
    """
    Look a freshly built song up and adopt the earliest match.

    Returns:
        False when the song belongs in the unresolved queue
    """
    if not song.title:
        logger.warning(f"Nothing to query for '{song.raw_title}'. Skipping for now.")
        return False
    try:
        matches = resolver.resolve(song.artist, song.title)
    except NotFoundError:
        logger.warning(f"Song not found. {song.artist} - {song.title}, Skipping for now.")
        return False
    except TransportFailure as e:
        logger.warning(f"Lookup failed for {song.artist} - {song.title}: {e}. Skipping for now.")
        return False
    song.apply_match(matches[0])
    return True


def ingest(entries: Iterable[Entry], resolver: MusicBrainzClient,
           show_progress: bool = True) -> Tuple[List[Song], List[Song]]:
    """
    Normalize and look up every entry, one MusicBrainz request at a time.

    Returns:
        Tuple of (resolved songs, unresolved songs), each in feed order
    """
    entries = list(entries)
    resolved: List[Song] = []
    unresolved: List[Song] = []
    logger.info(f"Receiving data for {len(entries)} entries...")
    with logging_redirect_tqdm():
        for entry in tqdm(entries, desc="Resolving songs", disable=not show_progress, leave=False):
            song = build_song(entry)
            if resolve_song(song, resolver):
                resolved.append(song)
            else:
                unresolved.append(song)
    logger.info(f"All data received: {len(resolved)} resolved, {len(unresolved)} need review")
    return resolved, unresolved


def run_pipeline(entries: Iterable[Entry], resolver: MusicBrainzClient, io: PromptIO,
                 page_size: int = 20, browse: bool = True, save_path: Optional[Path] = None,
                 show_progress: bool = True) -> List[Song]:
    """
    Turn feed entries into the final, year-sorted song list.

    Args:
        entries: Entries from the source feed
        resolver: MusicBrainz client
        io: Prompt I/O for review and browsing
        page_size: Initial rows per browser page
        browse: False to skip the final browser
        save_path: If given, the song list is saved after review and after browsing
        show_progress: Show a progress bar during lookups

    Returns:
        Every accepted song, sorted ascending by release year
    """
    resolved, unresolved = ingest(entries, resolver, show_progress=show_progress)
    decided, _ = review_unresolved(unresolved, resolver, io)
    songs = merge_reviewed(resolved, decided)
    if save_path is not None:
        save_songs(save_path, songs)
    return finish(songs, resolver, io, page_size=page_size, browse=browse, save_path=save_path)


def finish(songs: List[Song], resolver: MusicBrainzClient, io: PromptIO, page_size: int = 20,
           browse: bool = True, save_path: Optional[Path] = None) -> List[Song]:
    """Browse (optionally) and sort a fully decided song list."""
    if browse:
        logger.info("Continuing with final review...")
        songs = CatalogBrowser(songs, resolver, io, page_size=page_size).run()
    else:
        songs = sort_by_release_year(songs)
    if save_path is not None:
        save_songs(save_path, songs)
    return songs
