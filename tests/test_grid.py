from chordgrid.grid import (
    chords_by_line,
    clamp_grid_position,
    placement_at,
    placements_for_line,
    reindex_after_lyrics_edit,
    remove_placement,
    to_char_offset,
    to_grid_position,
    upsert_placement,
)
from chordgrid.models import GRID_WIDTH, ChordPlacement

# ---------------------------------------------------------------------------
# to_grid_position
# ---------------------------------------------------------------------------


def test_short_line_maps_one_char_per_slot():
    assert to_grid_position("hello", 3) == 3


def test_empty_line_maps_offset_directly():
    assert to_grid_position("", 0) == 0
    assert to_grid_position("", 5) == 5


def test_empty_line_clamps_large_offset():
    assert to_grid_position("", 30) == GRID_WIDTH - 1


def test_long_line_spreads_chars_over_slots():
    line = "x" * 48  # two characters per slot
    assert to_grid_position(line, 10) == 5


def test_half_slot_rounds_up():
    line = "x" * 48
    assert to_grid_position(line, 11) == 6


def test_end_of_line_clamped_to_last_slot():
    line = "x" * 48
    assert to_grid_position(line, 47) == 23
    assert to_grid_position(line, 48) == 23


def test_grid_position_is_monotonic():
    for line in ("", "short", "x" * 24, "x" * 37, "x" * 100):
        slots = [to_grid_position(line, c) for c in range(len(line) + 1)]
        assert slots == sorted(slots)


def test_grid_position_always_in_bounds():
    for line in ("", "a", "x" * 23, "x" * 25, "x" * 200):
        for c in range(len(line) + 1):
            assert 0 <= to_grid_position(line, c) <= GRID_WIDTH - 1


# ---------------------------------------------------------------------------
# to_char_offset
# ---------------------------------------------------------------------------


def test_char_offset_long_line():
    assert to_char_offset("x" * 48, 5) == 10


def test_char_offset_clamped_to_line_length():
    assert to_char_offset("abc", 10) == 3


def test_char_offset_clamps_slot():
    assert to_char_offset("x" * 48, 99) == 46
    assert to_char_offset("x" * 48, -4) == 0


def test_char_offset_inverts_grid_position():
    for length in (24, 30, 48, 61, 120):
        line = "x" * length
        for slot in range(GRID_WIDTH):
            assert to_grid_position(line, to_char_offset(line, slot)) == slot


def test_clamp_grid_position():
    assert clamp_grid_position(-3) == 0
    assert clamp_grid_position(24) == 23
    assert clamp_grid_position(7) == 7


# ---------------------------------------------------------------------------
# placements_for_line
# ---------------------------------------------------------------------------


def test_placements_sorted_by_grid_position():
    placements = [
        ChordPlacement("A", 0, 5),
        ChordPlacement("B", 0, 1),
        ChordPlacement("C", 0, 9),
    ]
    result = placements_for_line(placements, 0)
    assert [p.grid_position for p in result] == [1, 5, 9]


def test_placements_filtered_by_line():
    placements = [ChordPlacement("A", 0, 5), ChordPlacement("B", 1, 1)]
    assert placements_for_line(placements, 1) == [ChordPlacement("B", 1, 1)]


def test_placements_for_line_without_chords_is_empty_list():
    assert placements_for_line([ChordPlacement("A", 0, 5)], 3) == []
    assert placements_for_line([], 0) == []


def test_placements_with_same_slot_keep_order():
    placements = [ChordPlacement("First", 0, 3), ChordPlacement("Second", 0, 3)]
    result = placements_for_line(placements, 0)
    assert [p.name for p in result] == ["First", "Second"]


def test_chords_by_line():
    placements = [ChordPlacement("A", 2, 0), ChordPlacement("B", 0, 4)]
    assert chords_by_line(placements, 3) == [
        [ChordPlacement("B", 0, 4)],
        [],
        [ChordPlacement("A", 2, 0)],
    ]


def test_placement_at():
    placements = [ChordPlacement("A", 0, 5), ChordPlacement("B", 1, 5)]
    assert placement_at(placements, 1, 5) == ChordPlacement("B", 1, 5)
    assert placement_at(placements, 1, 6) is None


# ---------------------------------------------------------------------------
# upsert_placement / remove_placement
# ---------------------------------------------------------------------------


def test_upsert_replaces_occupied_slot():
    placements = [ChordPlacement("Am", 0, 4), ChordPlacement("G", 0, 8)]
    result = upsert_placement(placements, ChordPlacement("C", 0, 4))
    in_slot = [p for p in result if p.line_index == 0 and p.grid_position == 4]
    assert in_slot == [ChordPlacement("C", 0, 4)]
    assert len(result) == 2


def test_upsert_same_slot_on_other_line_keeps_both():
    placements = [ChordPlacement("Am", 0, 4)]
    result = upsert_placement(placements, ChordPlacement("C", 1, 4))
    assert len(result) == 2


def test_upsert_does_not_mutate_input():
    placements = [ChordPlacement("Am", 0, 4)]
    result = upsert_placement(placements, ChordPlacement("C", 0, 4))
    assert placements == [ChordPlacement("Am", 0, 4)]
    assert result is not placements


def test_remove_placement():
    placements = [ChordPlacement("Am", 0, 4), ChordPlacement("G", 0, 8)]
    assert remove_placement(placements, 0, 4) == [ChordPlacement("G", 0, 8)]


def test_remove_absent_placement_is_noop():
    placements = [ChordPlacement("Am", 0, 4)]
    result = remove_placement(placements, 2, 4)
    assert result == placements
    assert result is not placements


# ---------------------------------------------------------------------------
# reindex_after_lyrics_edit
# ---------------------------------------------------------------------------


def test_reindex_drops_orphaned_lines():
    placements = [ChordPlacement("A", i, i) for i in range(4)]
    result = reindex_after_lyrics_edit(placements, 2)
    assert {p.line_index for p in result} == {0, 1}


def test_reindex_keeps_grid_positions():
    placements = [ChordPlacement("A", 0, 17)]
    assert reindex_after_lyrics_edit(placements, 5) == placements
