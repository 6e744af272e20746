"""
SVG card sheets for printing.

Cards are 65 mm squares laid out three by four on A4 portrait sheets. Each
card front shows the release year large and centred, the artist along the
top and the title along the bottom, with an optional corner icon and an
optional background design. A cards.csv index with the YouTube Music link of
every card is written next to the sheets.
"""

import csv
import logging
import re
from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import escape, quoteattr

from .exceptions import AssetError
from .models import Song

logger = logging.getLogger(__name__)

SHEET_WIDTH = 210
SHEET_HEIGHT = 297
CARD_SIZE = 65
COLUMNS = 3
ROWS = 4
CARDS_PER_SHEET = COLUMNS * ROWS

_XML_DECL_RE = re.compile(r"<\?xml[^>]*\?>\s*")


def read_asset(path: Optional[str]) -> str:
    """
    Read an SVG asset for embedding, without its XML declaration.

    Raises:
        AssetError: if a configured asset cannot be read
    """
    if not path:
        return ""
    try:
        content = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise AssetError(f"Cannot read card asset {path}: {e}")
    return _XML_DECL_RE.sub("", content, count=1).strip()


class CardRenderer:
    """
    Renders songs to SVG sheets.

    Args:
        font_family: CSS font-family used for all card text
        icon_path: Optional SVG drawn in the top-left corner of each card
        background_path: Optional SVG drawn behind each card
    """

    def __init__(self, font_family: str = "sans-serif", icon_path: Optional[str] = None,
                 background_path: Optional[str] = None):
        self.font_family = font_family
        self.icon = read_asset(icon_path)
        self.background = read_asset(background_path)

    def _text(self, text: str, y: float, size: float) -> str:
        return (
            f'<text x="50" y="{y}" font-size="{size}" text-anchor="middle" '
            f'font-family={quoteattr(self.font_family)}>{escape(text)}</text>'
        )

    def card_front(self, song: Song) -> str:
        parts = ['<svg viewBox="0 0 100 100">']
        if self.background:
            parts.append(self.background)
        else:
            parts.append('<rect x="0" y="0" width="100" height="100" fill="#ffffff" stroke="#000000" stroke-width="0.5"/>')
        parts.append(self._text(str(song.release_year), 60, 30))
        parts.append(self._text(song.artist, 14, 5))
        parts.append(self._text(song.title, 90, 5))
        if self.icon:
            parts.append('<svg x="3" y="3" width="10" height="10" viewBox="0 0 100 100">')
            parts.append(self.icon)
            parts.append('</svg>')
        parts.append('</svg>')
        return "\n".join(parts)

    def sheet(self, songs: List[Song]) -> str:
        """One A4 sheet holding up to twelve cards."""
        offset_x = (SHEET_WIDTH - COLUMNS * CARD_SIZE) / 2
        offset_y = (SHEET_HEIGHT - ROWS * CARD_SIZE) / 2
        parts = [
            f'<svg viewBox="0 0 {SHEET_WIDTH} {SHEET_HEIGHT}" version="1.1" xmlns="http://www.w3.org/2000/svg">',
            f'<rect fill="#ffffff" x="0" y="0" width="{SHEET_WIDTH}" height="{SHEET_HEIGHT}"/>',
        ]
        for i, song in enumerate(songs[:CARDS_PER_SHEET]):
            x = offset_x + (i % COLUMNS) * CARD_SIZE
            y = offset_y + (i // COLUMNS) * CARD_SIZE
            parts.append(f'<svg x="{x}" y="{y}" width="{CARD_SIZE}" height="{CARD_SIZE}">')
            parts.append(self.card_front(song))
            parts.append('</svg>')
        parts.append('</svg>')
        return "\n".join(parts) + "\n"

    def render(self, songs: List[Song], output_dir: Path) -> List[Path]:
        """
        Write cards_001.svg, cards_002.svg, ... and cards.csv into output_dir.

        Returns:
            Paths of the written sheets
        """
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        sheets = []
        for number, start in enumerate(range(0, len(songs), CARDS_PER_SHEET), start=1):
            path = out / f"cards_{number:03d}.svg"
            path.write_text(self.sheet(songs[start:start + CARDS_PER_SHEET]), encoding='utf-8')
            sheets.append(path)

        with (out / "cards.csv").open('w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(["artist", "title", "release_year", "link"])
            for song in songs:
                writer.writerow([song.artist, song.title, song.release_year, song.link])

        logger.info(f"Wrote {len(sheets)} card sheet(s) for {len(songs)} song(s) to {out}")
        return sheets
