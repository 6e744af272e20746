"""
Manual review of songs whose MusicBrainz lookup failed.

Each unresolved song is decided once: fallback to the YouTube publish year,
a year typed by the user, or a new lookup with edited artist/title. The user
can also answer "the same way for all remaining", which is carried as an
explicit BulkMode from one song to the next.
"""

import logging
from enum import Enum
from typing import List, Tuple

from .display import action_line, color, C_BRIGHT_GREEN, C_GREEN, C_RED
from .exceptions import NotFoundError, TransportFailure
from .models import Song
from .musicbrainz_client import MusicBrainzClient
from .prompt_io import PromptIO, prompt_int, prompt_text

logger = logging.getLogger(__name__)

YEAR_MIN = 1
YEAR_MAX = 9999


class BulkMode(Enum):
    NONE = "none"
    ALWAYS_FALLBACK = "always_fallback"
    ALWAYS_MANUAL_PROMPT = "always_manual_prompt"


class ReviewAction:
    """Menu numbers of the review prompt."""
    USE_FALLBACK = 1
    MANUAL_YEAR = 2
    NEW_QUERY = 3
    FALLBACK_FOR_ALL = 4
    MANUAL_FOR_ALL = 5


def prompt_year(io: PromptIO, song: Song) -> int:
    io.print(f"Enter year for {color(song.raw_title, C_BRIGHT_GREEN)}:")
    return prompt_int(io, YEAR_MIN, YEAR_MAX)


def requery(song: Song, resolver: MusicBrainzClient, io: PromptIO) -> bool:
    """
    Ask for a new artist/title, look it up and adopt the earliest match.

    Returns:
        True if the song was updated, False if the lookup failed (the song
        is left untouched and the caller shows its menu again)
    """
    artist = prompt_text(io, "Artist:")
    title = prompt_text(io, "Title:")
    try:
        matches = resolver.resolve(artist, title)
    except (NotFoundError, TransportFailure) as e:
        logger.info(f"Song not found: {e}")
        io.print(color("Song not found", C_RED))
        return False
    song.apply_match(matches[0])
    return True


def _print_menu(io: PromptIO, song: Song) -> None:
    io.print()
    io.print(f"YouTube title:  {color(song.raw_title, C_BRIGHT_GREEN)}")
    io.print(f"Queried title:  {color(song.artist, C_BRIGHT_GREEN)} - {color(song.title, C_BRIGHT_GREEN)}")
    io.print()
    io.print("Actions:")
    io.print(action_line("1", f"Use YouTube upload date ({song.fallback_year})"))
    io.print(action_line("2", "Manually set release year"))
    io.print(action_line("3", "Edit song name for database query"))
    io.print(action_line("4", "Use YouTube upload date for all remaining"))
    io.print(action_line("5", "Manually set release year for all remaining"))
    io.print()
    io.print("Enter number:")


def review_song(song: Song, resolver: MusicBrainzClient, io: PromptIO,
                bulk_mode: BulkMode = BulkMode.NONE) -> BulkMode:
    """
    Decide the release year of one unresolved song.

    Args:
        song: Song whose lookup failed; updated in place
        resolver: Client used for a re-query with edited text
        io: Prompt I/O
        bulk_mode: Directive chosen earlier in this pass

    Returns:
        The bulk mode for the songs that follow (unchanged unless the user
        picked one of the "for all remaining" actions)
    """
    if bulk_mode is BulkMode.ALWAYS_FALLBACK:
        song.use_fallback_year()
    elif bulk_mode is BulkMode.ALWAYS_MANUAL_PROMPT:
        song.release_year = prompt_year(io, song)
    else:
        while True:
            _print_menu(io, song)
            action = prompt_int(io, ReviewAction.USE_FALLBACK, ReviewAction.MANUAL_FOR_ALL)
            if action == ReviewAction.USE_FALLBACK:
                song.use_fallback_year()
            elif action == ReviewAction.MANUAL_YEAR:
                song.release_year = prompt_year(io, song)
            elif action == ReviewAction.NEW_QUERY:
                if not requery(song, resolver, io):
                    continue
            elif action == ReviewAction.FALLBACK_FOR_ALL:
                bulk_mode = BulkMode.ALWAYS_FALLBACK
                song.use_fallback_year()
            elif action == ReviewAction.MANUAL_FOR_ALL:
                bulk_mode = BulkMode.ALWAYS_MANUAL_PROMPT
                song.release_year = prompt_year(io, song)
            break

    logger.info(f"Using {song.release_year} for {song.raw_title}")
    return bulk_mode


def review_unresolved(unresolved: List[Song], resolver: MusicBrainzClient, io: PromptIO,
                      bulk_mode: BulkMode = BulkMode.NONE) -> Tuple[List[Song], BulkMode]:
    """
    Run one review pass over the unresolved queue, in queue order.

    Returns:
        Tuple of (decided songs in the same order, final bulk mode)
    """
    if unresolved:
        logger.info("Revisiting songs that need manual intervention.")
    for song in unresolved:
        bulk_mode = review_song(song, resolver, io, bulk_mode)
    logger.info(f"All dates set for {len(unresolved)} song(s).")
    return list(unresolved), bulk_mode


def merge_reviewed(resolved: List[Song], decided: List[Song]) -> List[Song]:
    """Append decided songs after the resolved ones; ordering is fixed later."""
    return list(resolved) + list(decided)
