"""
Save and load the working song list so a review can be resumed.

One line per song, fields joined by the ASCII unit separator (0x1F) in the order:

    artist, title, release_year, fallback_year, source_id, raw_title, matched_title

matched_title is written as "+<title>" when present and "-" when absent.
Malformed lines are skipped with a warning; they never abort a load.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .models import Song

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\x1f"
FIELD_COUNT = 7
MATCHED_PRESENT = "+"
MATCHED_ABSENT = "-"

_UNSAFE_RE = re.compile(r"[\x1f\r\n]")


def create_backup(path: Path) -> Path:
    """Create a timestamped copy of an existing save file and return its path."""
    p = Path(path)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = p.parent / f"{p.stem}_backup_{timestamp}{p.suffix}"
    backup_path.write_text(p.read_text(encoding='utf-8'), encoding='utf-8')
    logger.info(f"Created backup: {backup_path}")
    return backup_path


def _safe(text: str) -> str:
    return _UNSAFE_RE.sub(" ", text or "")


def format_song(song: Song) -> str:
    if song.matched_title is None:
        matched = MATCHED_ABSENT
    else:
        matched = MATCHED_PRESENT + _safe(song.matched_title)
    return FIELD_SEPARATOR.join([
        _safe(song.artist),
        _safe(song.title),
        str(song.release_year),
        str(song.fallback_year),
        _safe(song.source_id),
        _safe(song.raw_title),
        matched,
    ])


def parse_song(line: str) -> Optional[Song]:
    """Parse one saved line; None if the field count, years or marker are wrong."""
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        return None
    artist, title, release_year, fallback_year, source_id, raw_title, matched = fields
    try:
        release = int(release_year)
        fallback = int(fallback_year)
    except ValueError:
        return None
    if matched == MATCHED_ABSENT:
        matched_title = None
    elif matched.startswith(MATCHED_PRESENT):
        matched_title = matched[len(MATCHED_PRESENT):]
    else:
        return None
    return Song(
        artist=artist,
        title=title,
        release_year=release,
        fallback_year=fallback,
        source_id=source_id,
        raw_title=raw_title,
        matched_title=matched_title,
    )


def save_songs(path: Path, songs: List[Song], make_backup: bool = True) -> None:
    p = Path(path)
    if make_backup and p.exists():
        create_backup(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open('w', encoding='utf-8', newline='\n') as f:
        for song in songs:
            f.write(format_song(song) + "\n")
    logger.info(f"Saved {len(songs)} song(s) to {p}")


def load_songs(path: Path) -> List[Song]:
    """
    Read a save file written by save_songs.

    Blank lines are ignored; lines that are not valid UTF-8, have the wrong
    number of fields or bad numbers are logged and skipped.
    """
    songs = []
    with Path(path).open('rb') as f:
        for line_no, raw in enumerate(f, start=1):
            try:
                line = raw.decode('utf-8')
            except UnicodeDecodeError:
                logger.warning(f"Skipping undecodable line {line_no} in {path}")
                continue
            if not line.strip("\r\n"):
                continue
            song = parse_song(line)
            if song is None:
                logger.warning(f"Skipping malformed line {line_no} in {path}")
                continue
            songs.append(song)
    logger.info(f"Loaded {len(songs)} song(s) from {path}")
    return songs
