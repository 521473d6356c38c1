"""Chord placement on the normalized lyric grid.

Chords are stored against a fixed-resolution grid of ``GRID_WIDTH`` slots
per line rather than raw character offsets, so a small lyric edit does not
shift every chord after the edit point.

  1. to_grid_position()         : character offset → grid slot
  2. to_char_offset()           : grid slot → character offset
  3. placements_for_line()      : chords of one line, left to right
  4. upsert_placement()         : put a chord in a slot (replacing)
  5. remove_placement()         : clear a slot
  6. reindex_after_lyrics_edit(): drop chords of lines that disappeared

Every function returns new values; input sequences are never mutated.
"""

import math
from collections.abc import Iterable

from .models import GRID_WIDTH, ChordPlacement


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _chars_per_slot(line: str) -> float:
    return max(1, len(line) / GRID_WIDTH)


def clamp_grid_position(value: int) -> int:
    """Clamp *value* into the valid slot range ``[0, GRID_WIDTH - 1]``."""
    return min(max(value, 0), GRID_WIDTH - 1)


# ---------------------------------------------------------------------------
# Coordinate mapping
# ---------------------------------------------------------------------------


def to_grid_position(line: str, char_offset: int) -> int:
    """Return the grid slot for a character offset within *line*.

    Lines shorter than the grid map one character per slot; longer lines
    spread ``len(line) / GRID_WIDTH`` characters over each slot.

    Example::

        >>> to_grid_position("x" * 48, 10)
        5
    """
    return clamp_grid_position(_round_half_up(char_offset / _chars_per_slot(line)))


def to_char_offset(line: str, grid_position: int) -> int:
    """Return the character offset in *line* where *grid_position* starts.

    Inverse of :func:`to_grid_position`: mapping the result back yields the
    same slot whenever the line is long enough to reach it.
    """
    slot = clamp_grid_position(grid_position)
    return min(_round_half_up(slot * _chars_per_slot(line)), len(line))


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def placements_for_line(
    placements: Iterable[ChordPlacement], line_index: int
) -> list[ChordPlacement]:
    """Return the chords on *line_index*, sorted left to right.

    The sort is stable, so two chords sharing a slot keep their original
    relative order.
    """
    matches = [p for p in placements if p.line_index == line_index]
    return sorted(matches, key=lambda p: p.grid_position)


def chords_by_line(
    placements: Iterable[ChordPlacement], line_count: int
) -> list[list[ChordPlacement]]:
    """Return :func:`placements_for_line` for every line ``0..line_count-1``."""
    placements = list(placements)
    return [placements_for_line(placements, i) for i in range(line_count)]


def placement_at(
    placements: Iterable[ChordPlacement], line_index: int, grid_position: int
) -> ChordPlacement | None:
    for p in placements:
        if p.line_index == line_index and p.grid_position == grid_position:
            return p
    return None


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------


def upsert_placement(
    placements: Iterable[ChordPlacement], new_placement: ChordPlacement
) -> list[ChordPlacement]:
    """Place *new_placement*, replacing whatever occupied its slot."""
    kept = [
        p
        for p in placements
        if not (
            p.line_index == new_placement.line_index
            and p.grid_position == new_placement.grid_position
        )
    ]
    kept.append(new_placement)
    return kept


def remove_placement(
    placements: Iterable[ChordPlacement], line_index: int, grid_position: int
) -> list[ChordPlacement]:
    """Clear one slot. Removing from an empty slot is a no-op."""
    return [
        p
        for p in placements
        if not (p.line_index == line_index and p.grid_position == grid_position)
    ]


def reindex_after_lyrics_edit(
    placements: Iterable[ChordPlacement], new_line_count: int
) -> list[ChordPlacement]:
    """Drop chords anchored to lines that no longer exist.

    Surviving chords keep their slots; the grid does not depend on line
    length, so nothing is recomputed.
    """
    return [p for p in placements if p.line_index < new_line_count]
