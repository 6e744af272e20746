"""
Text Utilities for Video Title Normalization

Turns the noisy titles and channel names found on YouTube music playlists
into an (artist, title) pair that can be used as a MusicBrainz query.

These functions handle common variations like:
- "Artist - Title" titles vs. auto-generated "Artist - Topic" channels
- Bracketed noise ([Official Video], [Lyrics], [HD])
- Parenthesized noise ((Official Audio)) vs. meaningful versions ((VIP Mix))
- Trailing "| Label | Channel" metadata
"""

import re
import unicodedata
from typing import Tuple

TITLE_SEPARATOR = " - "
TOPIC_SUFFIX = " - Topic"

# Parenthesized spans containing one of these mark an alternate version worth keeping
VERSION_KEYWORDS = ("remix", "edit", "vip")

_BRACKET_RE = re.compile(r"\[.*?\]")
_PAREN_RE = re.compile(r"\([^)]*\)")
_TRAILING_META_RE = re.compile(r"\|.*")
_HANDLE_SEPARATOR_RE = re.compile(r"[-|]")
_QUOTE_RE = re.compile(r'["\u201C\u201D\u201E\u201F]')


def pre_clean(text: str) -> str:
    """
    Normalize Unicode and whitespace before any structural cleaning.

    - Normalizes Unicode (NFKC, handles full-width forms and ligatures)
    - Removes zero-width characters
    - Collapses whitespace runs to a single space

    Args:
        text: Raw title or channel text

    Returns:
        Text with invisible characters removed and whitespace collapsed
    """
    if not text or not isinstance(text, str):
        return ""
    result = unicodedata.normalize('NFKC', text)
    result = re.sub(r'[\u200B-\u200D\uFEFF]', '', result)
    result = re.sub(r'\s+', ' ', result)
    return result.strip()


def clean_artist(text: str) -> str:
    """
    Clean the artist half of a video title or a channel name.

    Removes bracketed spans, then drops a leading channel handle: if a
    ``-`` or ``|`` is still present, only the text after the first one is kept.

    Examples:
        "[NCS] Artist Name" -> "Artist Name"
        "TrapNation | Artist Name" -> "Artist Name"

    Args:
        text: Artist segment or channel name

    Returns:
        Cleaned artist name (may be empty)
    """
    result = _BRACKET_RE.sub("", pre_clean(text)).strip()
    match = _HANDLE_SEPARATOR_RE.search(result)
    if match:
        result = result[match.end():]
    return re.sub(r'\s+', ' ', result).strip()


def _keep_version_paren(match: re.Match) -> str:
    content = match.group(0).lower()
    if any(keyword in content for keyword in VERSION_KEYWORDS):
        return match.group(0)
    return ""


def clean_title(text: str) -> str:
    """
    Clean the title half of a video title.

    Examples:
        "Song Title (Official Video) [HD]" -> "Song Title"
        "Song Title (Radio Edit) [Official Video]" -> "Song Title (Radio Edit)"
        'Song "Title" | Label Records' -> "Song Title"

    Args:
        text: Title segment of a video title

    Returns:
        Cleaned song title (may be empty)
    """
    result = _BRACKET_RE.sub("", pre_clean(text))
    result = _PAREN_RE.sub(_keep_version_paren, result)
    result = _TRAILING_META_RE.sub("", result)
    result = _QUOTE_RE.sub("", result)
    return re.sub(r'\s+', ' ', result).strip()


def strip_topic_suffix(channel_name: str) -> str:
    """Remove the " - Topic" suffix YouTube adds to auto-generated artist channels."""
    name = pre_clean(channel_name)
    if name.endswith(TOPIC_SUFFIX):
        name = name[:-len(TOPIC_SUFFIX)]
    return name


def normalize(raw_title: str, channel_name: str) -> Tuple[str, str]:
    """
    Derive an (artist, title) query pair from a video title and its channel.

    If the title contains " - " it is split on the first occurrence into
    artist and title. Otherwise the channel name is taken as the artist.
    Never raises; empty strings are valid results.

    Examples:
        ("Artist Name - Song Title (Radio Edit) [Official Video]", "x")
            -> ("Artist Name", "Song Title (Radio Edit)")
        ("Cool Song [Lyrics]", "SomeArtist - Topic") -> ("SomeArtist", "Cool Song")

    Args:
        raw_title: Video title as published
        channel_name: Name of the channel that owns the video

    Returns:
        Tuple of (artist, title)
    """
    raw_title = raw_title or ""
    if TITLE_SEPARATOR in raw_title:
        artist_part, title_part = raw_title.split(TITLE_SEPARATOR, 1)
        return clean_artist(artist_part), clean_title(title_part)
    return clean_artist(strip_topic_suffix(channel_name or "")), clean_title(raw_title)
