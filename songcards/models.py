from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Entry:
    """One raw playlist item, as fetched from the source feed."""
    id: str
    raw_title: str
    channel_name: str
    published_year: int


@dataclass(frozen=True)
class RecordingMatch:
    year: int
    canonical_title: str
    disambiguation: Optional[str] = None

    def sort_key(self):
        return (self.year, self.canonical_title)


@dataclass
class Song:
    artist: str
    title: str
    release_year: int
    fallback_year: int
    source_id: str
    raw_title: str
    matched_title: Optional[str] = None
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        self._frozen = True

    def __setattr__(self, name, value):
        # source_id and raw_title are write-once
        if name in ('source_id', 'raw_title') and getattr(self, '_frozen', False):
            raise AttributeError(f"Song.{name} cannot be changed once set")
        super().__setattr__(name, value)

    @classmethod
    def from_entry(cls, entry: Entry, artist: str, title: str) -> "Song":
        """Create an unresolved song whose year defaults to the publish year."""
        return cls(
            artist=artist,
            title=title,
            release_year=entry.published_year,
            fallback_year=entry.published_year,
            source_id=entry.id,
            raw_title=entry.raw_title,
        )

    def apply_match(self, match: RecordingMatch) -> None:
        self.release_year = match.year
        self.matched_title = match.canonical_title

    def use_fallback_year(self) -> None:
        self.release_year = self.fallback_year

    @property
    def link(self) -> str:
        return f"https://music.youtube.com/watch?v={self.source_id}"

    def __str__(self):
        return f"{self.artist}, {self.title}, {self.release_year}, {self.source_id}, {self.raw_title}"
