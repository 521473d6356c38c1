"""Song records stored as JSON files on the local filesystem."""

from pathlib import Path

from ..exceptions import FetchError, SongFormatError
from .base import SongSource


class FileSource(SongSource):
    """Reads song records from local paths. Matches anything that is not a URL."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location

    def fetch(self, location: str) -> str:
        try:
            return Path(location).read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(location, 0) from exc
        except UnicodeDecodeError as exc:
            raise SongFormatError("file is not UTF-8 text", location) from exc
