"""Data models for podcasts and their episodes."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Episode:
    """A single episode of a podcast feed."""

    guid: Optional[str]
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    published_at: Optional[datetime] = None
    author: Optional[str] = None
    duration_text: Optional[str] = None  # Raw itunes:duration, e.g. "01:02:03"
    media_url: Optional[str] = None
    season: Optional[int] = None
    episode_number: Optional[int] = None

    def to_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {
            "guid": self.guid,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "author": self.author,
            "duration_text": self.duration_text,
            "media_url": self.media_url,
            "season": self.season,
            "episode_number": self.episode_number,
        }


@dataclass(frozen=True)
class Podcast:
    """A podcast channel and its episodes in feed order."""

    url: str
    link: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    copyright: Optional[str] = None
    episodes: Tuple[Episode, ...] = ()

    def __post_init__(self):
        if not self.url:
            raise ValueError("Podcast url must not be empty")
        # Freeze whatever sequence was passed in
        object.__setattr__(self, "episodes", tuple(self.episodes))

    def to_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {
            "url": self.url,
            "link": self.link,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "copyright": self.copyright,
            "episodes": [episode.to_dict() for episode in self.episodes],
        }
