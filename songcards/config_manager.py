"""Configuration management for the song card builder."""

import os
from typing import Dict, Any

from .exceptions import ConfigurationError

DEFAULT_USER_AGENT = {
    'app_name': 'song-card-builder',
    'version': '1.0',
    'contact': 'https://github.com/song-card-builder/song-card-builder/issues',
}


class Config:
    """Configuration container with validation."""
    
    def __init__(self):
        """Initialize configuration from config.py file or the environment."""
        try:
            import sys
            from pathlib import Path
            
            # Add parent directory to path to import config
            config_dir = Path(__file__).parent.parent
            if str(config_dir) not in sys.path:
                sys.path.insert(0, str(config_dir))
            
            try:
                import config as config_module
                self._load_from_module(config_module)
            except ImportError:
                self._load_from_env()
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}")
        
        # Validation is an explicit call: the CLI validates after applying
        # command line overrides, tests construct Config() freely.
    
    def _load_from_module(self, config_module) -> None:
        """Load configuration from config.py module."""
        # YouTube source feed
        self.youtube_api_key = getattr(config_module, 'YOUTUBE_API_KEY', None)
        self.youtube_playlist_id = getattr(config_module, 'YOUTUBE_PLAYLIST_ID', None)
        
        # MusicBrainz
        self.musicbrainz_delay = getattr(config_module, 'MUSICBRAINZ_DELAY', 1.05)
        self.request_timeout = getattr(config_module, 'REQUEST_TIMEOUT', 30)
        mb_ua = getattr(config_module, 'MUSICBRAINZ_USER_AGENT', {})
        self.musicbrainz_user_agent = {
            'app_name': mb_ua.get('app_name', DEFAULT_USER_AGENT['app_name']),
            'version': mb_ua.get('version', DEFAULT_USER_AGENT['version']),
            'contact': mb_ua.get('contact', DEFAULT_USER_AGENT['contact'])
        }
        
        # Review / browsing
        self.page_size = getattr(config_module, 'PAGE_SIZE', 20)
        
        # Logging
        self.log_level = getattr(config_module, 'LOG_LEVEL', 'INFO')
        self.log_format = getattr(config_module, 'LOG_FORMAT', '%(asctime)s %(levelname)s: %(message)s')
        
        # Card rendering
        self.card_font_family = getattr(config_module, 'CARD_FONT_FAMILY', 'Cal Sans, sans-serif')
        self.card_icon_path = getattr(config_module, 'CARD_ICON_PATH', None)
        self.card_background_path = getattr(config_module, 'CARD_BACKGROUND_PATH', None)
    
    def _load_from_env(self) -> None:
        """Load configuration from environment variables (fallback)."""
        # YouTube source feed
        self.youtube_api_key = os.getenv('YOUTUBE_API_KEY')
        self.youtube_playlist_id = os.getenv('YOUTUBE_PLAYLIST_ID')
        
        # MusicBrainz
        self.musicbrainz_delay = float(os.getenv('MUSICBRAINZ_DELAY', '1.05'))
        self.request_timeout = int(os.getenv('REQUEST_TIMEOUT', '30'))
        self.musicbrainz_user_agent = {
            'app_name': os.getenv('MB_APP_NAME', DEFAULT_USER_AGENT['app_name']),
            'version': os.getenv('MB_VERSION', DEFAULT_USER_AGENT['version']),
            'contact': os.getenv('MB_CONTACT', DEFAULT_USER_AGENT['contact'])
        }
        
        # Review / browsing
        self.page_size = int(os.getenv('PAGE_SIZE', '20'))
        
        # Logging
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv('LOG_FORMAT', '%(asctime)s %(levelname)s: %(message)s')
        
        # Card rendering
        self.card_font_family = os.getenv('CARD_FONT_FAMILY', 'Cal Sans, sans-serif')
        self.card_icon_path = os.getenv('CARD_ICON_PATH') or None
        self.card_background_path = os.getenv('CARD_BACKGROUND_PATH') or None
    
    def _validate(self, require_feed: bool = True) -> None:
        """Validate required configuration values.

        Args:
            require_feed: False when resuming from a saved song file, where the
                YouTube credentials are not needed.
        """
        if require_feed:
            if not self.youtube_api_key:
                raise ConfigurationError(
                    "YOUTUBE_API_KEY is required. Set it in config.py or the YOUTUBE_API_KEY environment variable."
                )
            
            if self.youtube_api_key == "YOUR_API_KEY_HERE":
                raise ConfigurationError(
                    "Please update YOUTUBE_API_KEY in config.py with your actual API key."
                )
            
            if not self.youtube_playlist_id:
                raise ConfigurationError(
                    "YOUTUBE_PLAYLIST_ID is required. Set it in config.py, the environment, or pass --playlist-id."
                )
        
        if self.musicbrainz_delay < 1.0:
            raise ConfigurationError(
                "MUSICBRAINZ_DELAY must be at least 1.0 second to respect MusicBrainz rate limits."
            )
        
        if self.page_size < 10 or self.page_size % 10 != 0:
            raise ConfigurationError(
                "PAGE_SIZE must be a multiple of 10 and at least 10."
            )
    
    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            'youtube_playlist_id': self.youtube_playlist_id,
            'musicbrainz_delay': self.musicbrainz_delay,
            'request_timeout': self.request_timeout,
            'musicbrainz_user_agent': self.musicbrainz_user_agent,
            'page_size': self.page_size,
            'log_level': self.log_level,
            'card_font_family': self.card_font_family,
            'card_icon_path': self.card_icon_path,
            'card_background_path': self.card_background_path,
        }
    
    def __repr__(self) -> str:
        """String representation (sanitized - no API key)."""
        return (
            f"Config(playlist={self.youtube_playlist_id}, "
            f"musicbrainz_delay={self.musicbrainz_delay}s, "
            f"page_size={self.page_size})"
        )
