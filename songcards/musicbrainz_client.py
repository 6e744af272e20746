"""
MusicBrainz Recording Client

Provides a small interface to the MusicBrainz Web Service API v2 recording
search with:
- Rate limiting (one request in flight, fixed minimum delay between requests)
- JSON response parsing into ranked RecordingMatch candidates
- User agent management (required by MB TOS)

There is no retry inside this client: a failed call is reported to the
caller, which decides whether to re-query with edited text.

MusicBrainz Terms of Service:
- Maximum 1 request per second
- Identify your application with a proper user agent
- https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting
"""

import time
import logging
from typing import Optional, Dict, Any, List

import requests

from .exceptions import TransportFailure, NotFoundError, DateParseError
from .models import RecordingMatch

logger = logging.getLogger(__name__)


def _quote(value: str) -> str:
    """Quote a free-text value as a Lucene phrase."""
    escaped = (value or '').replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def build_recording_query(artist: str, title: str) -> str:
    """Conjunctive full-text filter on recording title and artist."""
    return f'recording:{_quote(title)} AND artist:{_quote(artist)}'


def parse_release_year(date: str) -> int:
    """
    Extract the year from a MusicBrainz release date.

    Examples:
        "1999-05-01" -> 1999
        "1999-05"    -> 1999
        "1999"       -> 1999

    Raises:
        DateParseError: if the year part is not an integer
    """
    year_part = date.split('-', 1)[0].strip() if isinstance(date, str) else ''
    try:
        return int(year_part)
    except ValueError:
        raise DateParseError(f"Unparseable release date: {date!r}")


def canonical_title(recording: Dict[str, Any]) -> str:
    """Credited artist names joined with ", ", then " - ", then the recording title."""
    names = []
    for credit in recording.get('artist-credit') or []:
        if isinstance(credit, dict):
            name = credit.get('name') or (credit.get('artist') or {}).get('name')
            if name:
                names.append(name)
    return f"{', '.join(names)} - {recording.get('title') or ''}"


class MusicBrainzClient:
    """
    Client for the MusicBrainz recording search.

    Args:
        delay: Minimum seconds between requests (default: 1.05, min: 1.0)
        user_agent: User agent dict with app_name, version, contact
        timeout: Request timeout in seconds
        limit: Maximum number of recordings requested per query
    """

    def __init__(
        self,
        delay: float = 1.05,
        user_agent: Optional[Dict[str, str]] = None,
        timeout: int = 30,
        limit: int = 25
    ):
        self.base_url = "https://musicbrainz.org/ws/2"
        self.min_delay = max(delay, 1.0)  # Enforce 1sec minimum per MB TOS
        self.timeout = timeout
        self.limit = limit
        self.last_request_time = 0.0

        self.session = requests.Session()
        if user_agent is None:
            user_agent = {
                'app_name': 'song-card-builder',
                'version': '1.0',
                'contact': 'your.email@example.com'
            }

        user_agent_string = (
            f"{user_agent['app_name']}/{user_agent['version']} "
            f"( {user_agent['contact']} )"
        )

        self.session.headers.update({
            'User-Agent': user_agent_string,
            'Accept': 'application/json'
        })

        logger.debug(f"MusicBrainz client initialized with user agent: {user_agent_string}")

    def _wait_for_rate_limit(self):
        """Wait until min_delay has passed since the previous response arrived."""
        current_time = time.time()
        time_since_last = current_time - self.last_request_time

        if time_since_last < self.min_delay:
            wait_time = self.min_delay - time_since_last
            logger.debug(f"Rate limiting: waiting {wait_time:.2f}s")
            time.sleep(wait_time)

    def _make_request(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        """
        Make a single request to the MusicBrainz API with rate limiting.

        Args:
            endpoint: API endpoint (e.g., 'recording')
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            TransportFailure: on non-2xx status, timeout, connection error,
                undecodable body, or an 'error' field in the body
        """
        self._wait_for_rate_limit()

        url = f"{self.base_url}/{endpoint}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.debug(f"MusicBrainz request timeout after {self.timeout}s")
            raise TransportFailure(f"MusicBrainz request timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            logger.debug(f"MusicBrainz request failed: {e}")
            raise TransportFailure(f"MusicBrainz request failed: {e}")
        finally:
            self.last_request_time = time.time()

        if not 200 <= response.status_code < 300:
            logger.debug(
                f"MusicBrainz error {response.status_code}: {response.text[:200]}"
            )
            raise TransportFailure(f"MusicBrainz request failed with status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            logger.debug(f"MusicBrainz JSON decode error: {e}")
            raise TransportFailure("MusicBrainz returned a body that is not JSON")

        if isinstance(body, dict) and body.get('error'):
            logger.debug(f"MusicBrainz returned an error: {body.get('error')}")
            raise TransportFailure(f"MusicBrainz returned an error: {body.get('error')}")

        return body

    def _parse_recordings(self, body: Dict[str, Any]) -> List[RecordingMatch]:
        """Turn a recording search body into sorted matches, dropping undated candidates."""
        matches: List[RecordingMatch] = []
        for recording in body.get('recordings') or []:
            date = recording.get('first-release-date')
            if date is None:
                continue
            try:
                year = parse_release_year(date)
            except DateParseError as e:
                logger.warning(f"Dropping candidate '{recording.get('title')}': {e}")
                continue
            matches.append(RecordingMatch(
                year=year,
                canonical_title=canonical_title(recording),
                disambiguation=recording.get('disambiguation') or None,
            ))
        matches.sort(key=RecordingMatch.sort_key)
        return matches

    def search_recordings(self, artist: str, title: str) -> List[RecordingMatch]:
        """
        Search recordings by artist and title.

        Args:
            artist: Artist name
            title: Recording title

        Returns:
            Matches sorted ascending by (year, canonical_title); the first one
            is the earliest known release.

        Raises:
            TransportFailure: the service could not answer this query
            NotFoundError: no candidate carried a usable release date
        """
        logger.info(f"Getting {artist} - {title}")
        params = {
            'query': build_recording_query(artist, title),
            'limit': str(self.limit),
            'fmt': 'json',
        }
        body = self._make_request('recording', params)
        matches = self._parse_recordings(body)
        if not matches:
            raise NotFoundError(f"No dated recording found for {artist} - {title}")

        logger.info(f"Found: {matches[0].canonical_title} ({matches[0].year})")
        for match in matches[1:]:
            logger.debug(f"  also: {match.canonical_title} ({match.year}) {match.disambiguation or ''}")
        return matches

    resolve = search_recordings
