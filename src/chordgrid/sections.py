"""Intro and bridge chord groups, plus lyric edits that affect them.

Intro and bridge chords are plain sequences of names, not anchored to the
grid. A bridge is tied to the lyric line it precedes through the
``bridge_positions`` list, paired with ``bridges`` by index.

Every edit returns a new :class:`~chordgrid.models.Song`; out-of-range
indexes leave the song unchanged.
"""

from collections.abc import Iterable
from dataclasses import replace

from .grid import reindex_after_lyrics_edit
from .models import Song
from .transpose import transpose_all


def format_chord_sequence(chords: Iterable[str], semitones: int = 0, normalize: bool = False) -> str:
    """Return the transposed chords joined the way sections display them: ``Am / G / F``."""
    return " / ".join(transpose_all(chords, semitones, normalize))


def bridge_before_line(song: Song, line_index: int) -> list[str] | None:
    """Return the bridge chords shown before *line_index*, if any."""
    if line_index not in song.bridge_positions:
        return None
    bridge_index = song.bridge_positions.index(line_index)
    if bridge_index >= len(song.bridges):
        return None
    return song.bridges[bridge_index]


# ---------------------------------------------------------------------------
# Bridges
# ---------------------------------------------------------------------------


def add_bridge(song: Song, line_index: int) -> Song:
    if line_index in song.bridge_positions:
        return song
    return replace(
        song,
        bridges=[*song.bridges, []],
        bridge_positions=[*song.bridge_positions, line_index],
    )


def remove_bridge(song: Song, bridge_index: int) -> Song:
    if not 0 <= bridge_index < len(song.bridges):
        return song
    return replace(
        song,
        bridges=[b for i, b in enumerate(song.bridges) if i != bridge_index],
        bridge_positions=[p for i, p in enumerate(song.bridge_positions) if i != bridge_index],
    )


def append_to_bridge(song: Song, bridge_index: int, name: str) -> Song:
    if not 0 <= bridge_index < len(song.bridges):
        return song
    bridges = [
        [*bridge, name] if i == bridge_index else list(bridge)
        for i, bridge in enumerate(song.bridges)
    ]
    return replace(song, bridges=bridges)


def remove_from_bridge(song: Song, bridge_index: int, chord_index: int) -> Song:
    if not 0 <= bridge_index < len(song.bridges):
        return song
    bridge = song.bridges[bridge_index]
    if not 0 <= chord_index < len(bridge):
        return song
    bridges = [list(b) for b in song.bridges]
    del bridges[bridge_index][chord_index]
    return replace(song, bridges=bridges)


# ---------------------------------------------------------------------------
# Intro
# ---------------------------------------------------------------------------


def append_to_intro(song: Song, name: str) -> Song:
    return replace(song, intro=[*song.intro, name])


def remove_from_intro(song: Song, chord_index: int) -> Song:
    if not 0 <= chord_index < len(song.intro):
        return song
    return replace(song, intro=[c for i, c in enumerate(song.intro) if i != chord_index])


# ---------------------------------------------------------------------------
# Lyrics
# ---------------------------------------------------------------------------


def edit_lyrics(song: Song, lyrics: str) -> Song:
    """Replace the lyrics and drop chords and bridges left without a line."""
    line_count = len(lyrics.split("\n"))
    kept = [
        (bridge, pos)
        for bridge, pos in zip(song.bridges, song.bridge_positions)
        if pos < line_count
    ]
    return replace(
        song,
        lyrics=lyrics,
        chords=reindex_after_lyrics_edit(song.chords, line_count),
        bridges=[bridge for bridge, _ in kept],
        bridge_positions=[pos for _, pos in kept],
    )
