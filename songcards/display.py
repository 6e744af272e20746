"""
Terminal rendering for the review menus and the song table.

Colours are plain ANSI escapes; every function returns strings so callers
print them through their PromptIO.
"""

from typing import List, Optional

from rapidfuzz import fuzz

from .models import Song

C_RESET = "\033[0m"
C_GREEN = "\033[32m"
C_BRIGHT_GREEN = "\033[92m"
C_BLUE = "\033[34m"
C_CYAN = "\033[36m"
C_RED = "\033[31m"
C_GRAY = "\033[90m"

# Minimum partial_ratio for a detected name to count as the queried one
HIGHLIGHT_THRESHOLD = 90

TABLE_HEADERS = ("Artist", "Title", "Detected Title", "Year")


def color(text: str, code: str) -> str:
    return f"{code}{text}{C_RESET}"


def _matches_query(detected: str, queried: str) -> bool:
    if not detected or not queried:
        return False
    return fuzz.partial_ratio(detected.lower(), queried.lower()) >= HIGHLIGHT_THRESHOLD


def highlight_matched_title(matched_title: Optional[str], artist: str, title: str) -> str:
    """
    Emphasize the parts of a detected "Artists - Title" string that agree with the query.

    Credited artists found in the queried artist and a recording title found
    in the queried title are rendered green, the rest blue. Purely cosmetic.
    """
    if not matched_title:
        return ""
    if " - " not in matched_title:
        return color(matched_title, C_BLUE)

    artist_part, title_part = matched_title.split(" - ", 1)
    rendered_artists = []
    for name in artist_part.split(", "):
        code = C_GREEN if _matches_query(name, artist) else C_BLUE
        rendered_artists.append(color(name, code))
    title_code = C_GREEN if _matches_query(title_part, title) else C_BLUE
    return f"{color(', ', C_BLUE).join(rendered_artists)}{color(' - ', C_BLUE)}{color(title_part, title_code)}"


def _pad(visible: str, rendered: str, width: int) -> str:
    return rendered + " " * max(width - len(visible), 0)


def _border(left: str, middle: str, right: str, widths: List[int]) -> str:
    segments = ["─" * 4] + ["─" * (w + 2) for w in widths]
    return color(left + middle.join(segments) + right, C_GRAY)


def draw_table(songs: List[Song], page: int, page_size: int) -> List[str]:
    """
    Render one page of the song table.

    Column widths are taken from the whole set so they stay stable between
    pages; the page always has page_size rows, blank past the end of the list.
    """
    widths = [
        max([len(TABLE_HEADERS[0])] + [len(s.artist) for s in songs]),
        max([len(TABLE_HEADERS[1])] + [len(s.title) for s in songs]),
        max([len(TABLE_HEADERS[2])] + [len(s.matched_title or "") for s in songs]),
        max([len(TABLE_HEADERS[3])] + [len(str(s.release_year)) for s in songs]),
    ]
    bar = color("│", C_GRAY)

    lines = [_border("┌", "┬", "┐", widths)]
    header_cells = [" ## "] + [f" {_pad(h, color(h, C_GREEN), w)} " for h, w in zip(TABLE_HEADERS, widths)]
    lines.append(bar + bar.join(header_cells) + bar)
    lines.append(_border("├", "┼", "┤", widths))

    start = page * page_size
    for row in range(page_size):
        index = start + row
        song = songs[index] if 0 <= index < len(songs) else None
        if song is not None:
            year = str(song.release_year)
            cells = [
                (song.artist, color(song.artist, C_GREEN)),
                (song.title, color(song.title, C_GREEN)),
                (song.matched_title or "", highlight_matched_title(song.matched_title, song.artist, song.title)),
                (year, color(year, C_GREEN)),
            ]
        else:
            cells = [("", "")] * 4
        number = color(f"{row + 1:>2}", C_BLUE)
        row_cells = [f" {number} "] + [f" {_pad(v, r, w)} " for (v, r), w in zip(cells, widths)]
        lines.append(bar + bar.join(row_cells) + bar)

    lines.append(_border("└", "┴", "┘", widths))
    return lines


def action_line(key: str, text: str) -> str:
    return f"{color(key, C_BLUE)} {color(text, C_CYAN)}"
