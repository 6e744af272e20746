# Song Card Builder Configuration Template
# Copy this file to config.py and update with your settings

# ========== YOUTUBE SOURCE SETTINGS ==========
YOUTUBE_API_KEY = "YOUR_API_KEY_HERE"      # Google Cloud console -> YouTube Data API v3
YOUTUBE_PLAYLIST_ID = "PLxxxxxxxxxxxxxxxx"  # The "list=" part of the playlist URL

# ========== API RATE LIMITING ==========
# MusicBrainz accepts around one unauthenticated request per second

MUSICBRAINZ_DELAY = 1.05        # Seconds between MusicBrainz queries (min 1.0)
REQUEST_TIMEOUT = 30            # Seconds before a request counts as failed

# ========== MUSICBRAINZ SETTINGS ==========
# Required user agent for MusicBrainz API
MUSICBRAINZ_USER_AGENT = {
    "app_name": "song-card-builder",
    "version": "1.0",
    "contact": "your.email@example.com"  # UPDATE THIS
}

# ========== REVIEW SETTINGS ==========
PAGE_SIZE = 20                  # Songs per page in the final review (multiple of 10)

# ========== LOGGING SETTINGS ==========
LOG_LEVEL = "INFO"              # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

# ========== CARD RENDERING ==========
CARD_FONT_FAMILY = "Cal Sans, sans-serif"
CARD_ICON_PATH = None           # e.g. "assets/icon.svg"
CARD_BACKGROUND_PATH = None     # e.g. "assets/design0.svg"
