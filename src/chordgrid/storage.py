"""Conversion between stored records and chordgrid models.

Stored songs use the persistence layer's camelCase shape::

    {
        "title": "...", "artist": "...", "lyrics": "line one\\nline two",
        "chords": [{"name": "Am", "lineIndex": 0, "gridPosition": 4}],
        "intro": ["Am", "G"],
        "bridges": [["F", "G"]],
        "bridgePositions": [1]
    }

Older records are tolerated here so the rest of the package never has to
branch on shape:

- a chord's line may be stored under ``position`` instead of ``lineIndex``;
- a chord without ``gridPosition`` is placed from its legacy ``char`` offset;
- a ``gridPosition`` outside the grid is clamped;
- playlist songs may be bare id strings instead of ``{id, pitch}`` objects.
"""

import json
import logging
from typing import Any

from .exceptions import SongFormatError
from .grid import clamp_grid_position, to_grid_position
from .models import ChordPlacement, Playlist, PlaylistEntry, Song

logger = logging.getLogger(__name__)


def load_json(text: str, location: str = "") -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SongFormatError(f"invalid JSON ({exc.msg})", location) from exc


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_text(record: dict, key: str) -> str | None:
    value = record.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        logger.warning("Ignoring non-text %s field: %r", key, value)
        return None
    return value


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


# ---------------------------------------------------------------------------
# Songs
# ---------------------------------------------------------------------------


def _placement_from_dict(record: Any, lines: list[str]) -> ChordPlacement | None:
    if not isinstance(record, dict) or not isinstance(record.get("name"), str):
        logger.warning("Dropping chord record without a name: %r", record)
        return None

    line_index = record.get("lineIndex")
    if line_index is None:
        line_index = record.get("position")
    line_index = _as_int(line_index)
    if line_index is None or line_index < 0:
        logger.warning("Dropping chord %r without a valid line index", record["name"])
        return None

    grid_position = _as_int(record.get("gridPosition"))
    if grid_position is None:
        char = _as_int(record.get("char")) or 0
        line = lines[line_index] if line_index < len(lines) else ""
        grid_position = to_grid_position(line, char)
    elif clamp_grid_position(grid_position) != grid_position:
        logger.warning(
            "Clamping grid position %d of chord %r on line %d",
            grid_position,
            record["name"],
            line_index,
        )
        grid_position = clamp_grid_position(grid_position)

    return ChordPlacement(record["name"], line_index, grid_position)


def song_from_dict(record: Any, location: str = "") -> Song:
    """Build a :class:`~chordgrid.models.Song` from a stored record.

    Raises SongFormatError if *record* is not an object or has no lyrics.
    Malformed chord entries are dropped and logged rather than rejected.
    """
    if not isinstance(record, dict):
        raise SongFormatError("song record must be a JSON object", location)
    lyrics = record.get("lyrics")
    if not isinstance(lyrics, str):
        raise SongFormatError("song record has no lyrics", location)

    lines = lyrics.split("\n")
    chords = [
        p
        for p in (_placement_from_dict(c, lines) for c in _as_list(record.get("chords")))
        if p is not None
    ]

    bridges = [[str(c) for c in _as_list(b)] for b in _as_list(record.get("bridges"))]
    positions = [_as_int(p) for p in _as_list(record.get("bridgePositions"))]
    if len(bridges) != len(positions):
        logger.warning(
            "Song %r has %d bridges but %d bridge positions; extra entries ignored",
            record.get("title"),
            len(bridges),
            len(positions),
        )
    paired = [(b, p) for b, p in zip(bridges, positions) if p is not None]

    return Song(
        title=str(record.get("title") or ""),
        artist=str(record.get("artist") or ""),
        lyrics=lyrics,
        chords=chords,
        intro=[str(c) for c in _as_list(record.get("intro"))],
        bridges=[b for b, _ in paired],
        bridge_positions=[p for _, p in paired],
        key=_as_text(record, "key"),
        genre=_as_text(record, "genre"),
        youtube_id=_as_text(record, "youtube_id"),
        direction=_as_text(record, "direction") or "rtl",
        id=_as_text(record, "id"),
    )


def song_to_dict(song: Song) -> dict:
    record = {
        "title": song.title,
        "artist": song.artist,
        "lyrics": song.lyrics,
        "chords": [
            {"name": p.name, "lineIndex": p.line_index, "gridPosition": p.grid_position}
            for p in song.chords
        ],
        "intro": list(song.intro),
        "bridges": [list(b) for b in song.bridges],
        "bridgePositions": list(song.bridge_positions),
        "direction": song.direction,
    }
    for key in ("key", "genre", "youtube_id", "id"):
        value = getattr(song, key)
        if value is not None:
            record[key] = value
    return record


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------


def _entry_from_dict(record: Any) -> PlaylistEntry | None:
    if isinstance(record, str):
        return PlaylistEntry(record)
    if isinstance(record, dict) and isinstance(record.get("id"), str):
        return PlaylistEntry(record["id"], _as_int(record.get("pitch")) or 0)
    logger.warning("Dropping playlist entry without a song id: %r", record)
    return None


def playlist_from_dict(record: Any, location: str = "") -> Playlist:
    if not isinstance(record, dict):
        raise SongFormatError("playlist record must be a JSON object", location)
    entries = [
        e for e in (_entry_from_dict(s) for s in _as_list(record.get("songs"))) if e is not None
    ]
    return Playlist(
        name=str(record.get("name") or ""),
        entries=entries,
        id=_as_text(record, "id"),
    )


def playlist_to_dict(playlist: Playlist) -> dict:
    record = {
        "name": playlist.name,
        "songs": [{"id": e.song_id, "pitch": e.pitch} for e in playlist.entries],
    }
    if playlist.id is not None:
        record["id"] = playlist.id
    return record
