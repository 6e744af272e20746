#!/usr/bin/env python3
"""
build_song_cards.py - Music trivia cards from a YouTube playlist

WORKFLOW:
1. Fetch every video of the playlist (YouTube Data API v3)
2. Derive artist and title from each video title / channel name
3. Look up the earliest release year on MusicBrainz (one request per second)
4. Review songs that could not be found: YouTube upload year, manual year,
   or a new query with edited artist/title (optionally "for all remaining")
5. Browse and edit the whole list page by page
6. Sort by release year and write printable SVG card sheets

FEATURES:
- --save keeps a resumable copy of the song list after review and after browsing
- --resume skips fetching and lookups and goes straight to the final review
- --max-items limits the run for quick tests against a large playlist

Configure config.py (copy from config.template.py) or set environment variables
before running.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add repository root to Python path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from songcards.card_renderer import CardRenderer
from songcards.config_manager import Config
from songcards.exceptions import SongCardsError
from songcards.musicbrainz_client import MusicBrainzClient
from songcards.pipeline import finish, run_pipeline
from songcards.prompt_io import ConsolePromptIO
from songcards.song_store import load_songs
from songcards.youtube_client import YouTubeClient


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Build music trivia cards from a YouTube playlist",
        epilog="""
Examples:
  # Full run with settings from config.py
  python scripts/build_song_cards.py --save songs.txt

  # Try the first 25 videos of another playlist
  python scripts/build_song_cards.py --playlist-id PLxxxx --max-items 25

  # Continue editing a saved list and render it again
  python scripts/build_song_cards.py --resume songs.txt --save songs.txt
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--playlist-id", type=str,
                        help="YouTube playlist id (overrides YOUTUBE_PLAYLIST_ID)")
    parser.add_argument("--max-items", type=int,
                        help="Only process the first N playlist entries")
    parser.add_argument("--resume", type=Path,
                        help="Load a saved song list instead of fetching the playlist")
    parser.add_argument("--save", type=Path,
                        help="Save the song list after review and after browsing")
    parser.add_argument("--output", type=Path, default=Path("cards"),
                        help="Directory for the SVG card sheets (default: cards)")
    parser.add_argument("--page-size", type=int,
                        help="Songs per page in the final review (multiple of 10)")
    parser.add_argument("--delay", type=float,
                        help="Seconds between MusicBrainz requests (min 1.0)")
    parser.add_argument("--no-browse", action="store_true",
                        help="Skip the final page-by-page review")
    parser.add_argument("--log-file", type=str,
                        help="Also write log output to this file")
    return parser.parse_args(argv)


def setup_logging(config: Config, log_file=None) -> None:
    logging.basicConfig(level=getattr(logging, str(config.log_level).upper(), logging.INFO),
                        format=config.log_format)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(config.log_format))
        logging.getLogger().addHandler(file_handler)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = Config()
    except SongCardsError as e:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
        logging.error(f"Failed to load configuration: {e}")
        logging.error("Please ensure config.py exists (copy from config.template.py)")
        return 1

    if args.playlist_id:
        config.youtube_playlist_id = args.playlist_id
    if args.page_size is not None:
        config.page_size = args.page_size
    if args.delay is not None:
        config.musicbrainz_delay = args.delay

    setup_logging(config, args.log_file)

    try:
        config._validate(require_feed=args.resume is None)
        logging.info(f"Configuration loaded: {config}")

        renderer = CardRenderer(
            font_family=config.card_font_family,
            icon_path=config.card_icon_path,
            background_path=config.card_background_path,
        )
        resolver = MusicBrainzClient(
            delay=config.musicbrainz_delay,
            user_agent=config.musicbrainz_user_agent,
            timeout=config.request_timeout,
        )
        io = ConsolePromptIO()

        if args.resume:
            songs = load_songs(args.resume)
            songs = finish(songs, resolver, io, page_size=config.page_size,
                           browse=not args.no_browse, save_path=args.save)
        else:
            logging.info("Fetching videos from playlist...")
            youtube = YouTubeClient(config.youtube_api_key, timeout=config.request_timeout)
            entries = youtube.fetch_playlist_entries(config.youtube_playlist_id)
            if args.max_items:
                entries = entries[:args.max_items]
            logging.info(
                f"Setting request delay to {resolver.min_delay}s to not get rate limited by MusicBrainz"
            )
            songs = run_pipeline(entries, resolver, io, page_size=config.page_size,
                                 browse=not args.no_browse, save_path=args.save)

        logging.info("Creating card sheets...")
        renderer.render(songs, args.output)
    except (SongCardsError, OSError) as e:
        logging.error(f"Aborting: {e}")
        return 1
    except KeyboardInterrupt:
        logging.warning("Interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
