"""Plain-text song rendering: chord rows above lyric lines.

Chords are laid out on a row at least ``GRID_WIDTH`` columns wide so that
short lines still spread their chords across the grid::

    Intro: Am / G

    Am          G
    Hello darkness, my old friend
"""

from .grid import placements_for_line, to_char_offset
from .models import GRID_WIDTH, ChordPlacement, Song
from .sections import bridge_before_line, format_chord_sequence
from .transpose import transpose


def _chord_row(
    line: str, chords: list[ChordPlacement], semitones: int, width: int | None, normalize: bool
) -> str:
    layout = line.ljust(width or max(len(line), GRID_WIDTH))
    row = ""
    for chord in chords:
        column = to_char_offset(layout, chord.grid_position)
        if row:
            # Never let a long chord name run into the next one.
            column = max(column, len(row) + 1)
        row = row.ljust(column) + transpose(chord.name, semitones, normalize)
    return row


def render_text(
    song: Song, semitones: int = 0, width: int | None = None, normalize: bool = False
) -> str:
    """Return *song* as text with every chord transposed by *semitones*.

    *width* fixes the chord row width instead of deriving it from each line.
    The result ends with a single newline.
    """
    parts: list[str] = []

    if song.intro:
        parts.append(f"Intro: {format_chord_sequence(song.intro, semitones, normalize)}")
        parts.append("")

    for line_index, line in enumerate(song.lines):
        bridge = bridge_before_line(song, line_index)
        if bridge:
            parts.append(f"Bridge: {format_chord_sequence(bridge, semitones, normalize)}")
        chords = placements_for_line(song.chords, line_index)
        if chords:
            parts.append(_chord_row(line, chords, semitones, width, normalize))
        parts.append(line)

    return "\n".join(parts) + "\n"
