class ChordGridError(Exception):
    """Base exception for chordgrid."""


class FetchError(ChordGridError):
    """Raised when a song record cannot be read from its location."""

    def __init__(self, location: str, status_code: int):
        self.location = location
        self.status_code = status_code
        if status_code:
            super().__init__(f"HTTP {status_code} fetching {location}")
        else:
            super().__init__(f"Could not read {location}")


class SongFormatError(ChordGridError):
    """Raised when a stored record cannot be turned into a Song or Playlist."""

    def __init__(self, reason: str, location: str = ""):
        self.reason = reason
        self.location = location
        prefix = f"{location}: " if location else ""
        super().__init__(f"{prefix}{reason}")


class UnsupportedSourceError(ChordGridError):
    """Raised when no song source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No song source found for: {location}")
