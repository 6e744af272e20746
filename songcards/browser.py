"""
Final paginated review of every accepted song.

The page view is a table of songs; typing a row number opens a menu to
re-query, edit or reset that song. Navigation commands:

    a / d   previous / next page
    + / -   ten more / ten fewer rows per page (never below ten)
    y       finish
"""

import logging
import math
from typing import List

from .display import action_line, color, draw_table, C_BLUE, C_BRIGHT_GREEN, C_CYAN, C_GREEN
from .exceptions import InputValidationError
from .models import Song
from .musicbrainz_client import MusicBrainzClient
from .prompt_io import PromptIO, INPUT_ARROW, parse_int, prompt_int, prompt_text
from .review import YEAR_MIN, YEAR_MAX, requery

logger = logging.getLogger(__name__)

PAGE_SIZE_STEP = 10
MIN_PAGE_SIZE = 10


class SongAction:
    """Menu numbers of the per-song prompt."""
    NEW_QUERY = 1
    CHANGE_ARTIST = 2
    CHANGE_TITLE = 3
    CHANGE_YEAR = 4
    USE_FALLBACK = 5
    RETURN = 6


def sort_by_release_year(songs: List[Song]) -> List[Song]:
    """Stable ascending sort by release year, the order cards are exported in."""
    return sorted(songs, key=lambda s: s.release_year)


class CatalogBrowser:
    """
    Paginated inspector/editor over the accepted song list.

    Args:
        songs: Accepted songs; edited in place
        resolver: Client used for re-queries
        io: Prompt I/O
        page_size: Initial rows per page (rounded down to a multiple of ten, at least ten)
    """

    def __init__(self, songs: List[Song], resolver: MusicBrainzClient, io: PromptIO, page_size: int = 20):
        self.songs = songs
        self.resolver = resolver
        self.io = io
        self.page = 0
        self.page_size = max(MIN_PAGE_SIZE, page_size - page_size % PAGE_SIZE_STEP)

    @property
    def page_count(self) -> int:
        return math.ceil(len(self.songs) / self.page_size)

    def rows_on_page(self) -> int:
        start = self.page * self.page_size
        return max(0, min(self.page_size, len(self.songs) - start))

    def next_page(self) -> None:
        if self.page < self.page_count - 1:
            self.page += 1

    def previous_page(self) -> None:
        if self.page > 0:
            self.page -= 1

    def widen(self) -> None:
        self.page_size += PAGE_SIZE_STEP
        self._clamp_page()

    def narrow(self) -> None:
        if self.page_size > MIN_PAGE_SIZE:
            self.page_size -= PAGE_SIZE_STEP

    def _clamp_page(self) -> None:
        self.page = min(self.page, max(self.page_count - 1, 0))

    def select(self, row: int) -> bool:
        """
        Open the song menu for a 1-based row of the current page.

        Returns:
            False if the row is not on this page (nothing happens)
        """
        if row < 1 or row > self.rows_on_page():
            return False
        self.edit_song(self.songs[self.page * self.page_size + row - 1])
        return True

    def show_page(self) -> None:
        self.io.print()
        self.io.print(color(f"Page {self.page + 1}/{max(self.page_count, 1)}", C_GREEN))
        for line in draw_table(self.songs, self.page, self.page_size):
            self.io.print(line)
        self.io.print()
        self.io.print("Actions:")
        self.io.print(color("Number to select element", C_CYAN))
        self.io.print(color("a/d to change page", C_CYAN))
        self.io.print(color("+/- to change number of elements per page", C_CYAN))
        self.io.print(color("y to finish", C_CYAN))
        self.io.print()

    def _show_song(self, song: Song) -> None:
        self.io.print("Selected:")
        self.io.print(f"Title for card:  {color(song.artist, C_BRIGHT_GREEN)} - {color(song.title, C_BRIGHT_GREEN)}")
        if song.matched_title:
            self.io.print(f"Detected title:  {color(song.matched_title, C_BRIGHT_GREEN)}")
        self.io.print(f"Year:            {color(str(song.release_year), C_BRIGHT_GREEN)}")
        self.io.print()
        self.io.print("Actions:")
        self.io.print(action_line("1", "New query"))
        self.io.print(action_line("2", "Change artist"))
        self.io.print(action_line("3", "Change title"))
        self.io.print(action_line("4", "Change year"))
        self.io.print(action_line("5", f"Switch to YouTube year ({song.fallback_year})"))
        self.io.print(action_line("6", "Return"))
        self.io.print()

    def edit_song(self, song: Song) -> None:
        """Run the per-song menu until an action completes or the user returns."""
        while True:
            self._show_song(song)
            action = prompt_int(self.io, SongAction.NEW_QUERY, SongAction.RETURN)
            if action == SongAction.NEW_QUERY:
                if not requery(song, self.resolver, self.io):
                    continue
            elif action == SongAction.CHANGE_ARTIST:
                self.io.print(f"    {color(song.artist, C_BLUE)}")
                song.artist = prompt_text(self.io)
            elif action == SongAction.CHANGE_TITLE:
                self.io.print(f"    {color(song.title, C_BLUE)}")
                song.title = prompt_text(self.io)
            elif action == SongAction.CHANGE_YEAR:
                self.io.print(f"    {color(str(song.release_year), C_BLUE)}")
                song.release_year = prompt_int(self.io, YEAR_MIN, YEAR_MAX)
            elif action == SongAction.USE_FALLBACK:
                song.use_fallback_year()
                self.io.print(f"Using {color(str(song.release_year), C_BLUE)} for {color(song.raw_title, C_GREEN)}")
            return

    def handle(self, command: str) -> bool:
        """
        Apply one page-view command.

        Returns:
            True when the user confirmed completion
        """
        command = command.strip()
        if command.isdigit():
            try:
                row = parse_int(command)
            except InputValidationError:
                logger.debug(f"Ignoring row {command!r}")
                return False
            self.select(row)
        elif command == "a":
            self.previous_page()
        elif command == "d":
            self.next_page()
        elif command == "+":
            self.widen()
        elif command == "-":
            self.narrow()
        elif command == "y":
            return True
        return False

    def run(self) -> List[Song]:
        """
        Browse until the user confirms.

        Returns:
            The songs sorted ascending by release year
        """
        logger.info(f"Final review of {len(self.songs)} song(s)")
        while True:
            self.show_page()
            if self.handle(self.io.input(INPUT_ARROW)):
                break
        return sort_by_release_year(self.songs)
