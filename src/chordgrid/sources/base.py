from abc import ABC, abstractmethod

from ..models import Playlist, Song
from ..storage import load_json, playlist_from_dict, song_from_dict


class SongSource(ABC):
    """Abstract base class for places song records are read from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can read the given location."""

    @abstractmethod
    def fetch(self, location: str) -> str:
        """Read the record at location and return its raw JSON text.

        Raises FetchError when the location cannot be read.
        """

    def extract(self, text: str, location: str) -> Song:
        """Parse JSON text into a Song.

        Raises SongFormatError if the text is not a valid song record.
        """
        return song_from_dict(load_json(text, location), location)

    def load(self, location: str) -> Song:
        """Convenience method: fetch + extract."""
        return self.extract(self.fetch(location), location)

    def load_playlist(self, location: str) -> Playlist:
        text = self.fetch(location)
        return playlist_from_dict(load_json(text, location), location)
