"""
Custom exception hierarchy for the song card builder.

This module defines domain-specific exceptions so that callers can tell a
normal "nothing found" outcome apart from a transport failure or a fatal
setup problem.
"""


class SongCardsError(Exception):
    """Base exception for all song card builder errors."""
    pass


class APIError(SongCardsError):
    """Base class for all API-related errors."""
    pass


class TransportFailure(APIError):
    """MusicBrainz could not be reached or answered with an error for this query."""
    pass


class SourceFeedError(APIError):
    """The YouTube playlist feed failed. Fatal for the whole run."""
    pass


class DataError(SongCardsError):
    """Base class for data-related errors."""
    pass


class NotFoundError(DataError):
    """No recording candidate with a usable release date was found."""
    pass


class DateParseError(DataError):
    """A candidate's release date is present but not a parseable year."""
    pass


class InputValidationError(DataError):
    """User input at a prompt was non-numeric or out of range."""
    pass


class ConfigurationError(SongCardsError):
    """Configuration error (missing or invalid settings)."""
    pass


class AssetError(ConfigurationError):
    """A configured card asset (icon, background design) could not be read."""
    pass
