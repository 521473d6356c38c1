from dataclasses import dataclass, field

# Horizontal resolution of the chord grid. Every editor and renderer must
# agree on this value or stored placements will visually misalign.
GRID_WIDTH = 24

# Token authors drop between chords as a visual divider; never transposed.
SEPARATOR = "/"


@dataclass(frozen=True)
class ChordPlacement:
    """A chord anchored to a lyric line at a normalized grid slot.

    Example: ``ChordPlacement("Am7", line_index=2, grid_position=8)`` renders
    "Am7" a third of the way across the third line, whatever its length.
    """

    name: str
    line_index: int
    grid_position: int


@dataclass
class Song:
    """A song as the core sees it: lyrics plus every chord source."""

    title: str
    artist: str
    lyrics: str = ""
    chords: list[ChordPlacement] = field(default_factory=list)
    intro: list[str] = field(default_factory=list)
    bridges: list[list[str]] = field(default_factory=list)
    bridge_positions: list[int] = field(default_factory=list)  # paired by index with bridges
    key: str | None = None
    genre: str | None = None
    youtube_id: str | None = None
    direction: str = "rtl"  # text direction of the lyrics: "rtl" or "ltr"
    id: str | None = None

    @property
    def lines(self) -> list[str]:
        return self.lyrics.split("\n")


@dataclass(frozen=True)
class PlaylistEntry:
    """A song reference inside a playlist, with its own pitch offset."""

    song_id: str
    pitch: int = 0


@dataclass
class Playlist:
    name: str
    entries: list[PlaylistEntry] = field(default_factory=list)
    id: str | None = None
