import pytest

from chordgrid.models import ChordPlacement, Song
from chordgrid.sections import (
    add_bridge,
    append_to_bridge,
    append_to_intro,
    bridge_before_line,
    edit_lyrics,
    format_chord_sequence,
    remove_bridge,
    remove_from_bridge,
    remove_from_intro,
)


@pytest.fixture
def song() -> Song:
    return Song(
        title="Sound of Silence",
        artist="Simon & Garfunkel",
        lyrics="line one\nline two\nline three",
        chords=[
            ChordPlacement("Am", 0, 0),
            ChordPlacement("G", 1, 6),
            ChordPlacement("F", 2, 10),
        ],
        intro=["Am", "G"],
        bridges=[["F", "G"], ["C"]],
        bridge_positions=[0, 2],
    )


# ---------------------------------------------------------------------------
# format_chord_sequence / bridge_before_line
# ---------------------------------------------------------------------------


def test_format_chord_sequence():
    assert format_chord_sequence(["Am", "G"]) == "Am / G"


def test_format_chord_sequence_transposed():
    assert format_chord_sequence(["Am", "G"], 2) == "Bm / A"


def test_format_empty_sequence():
    assert format_chord_sequence([]) == ""


def test_bridge_before_line(song):
    assert bridge_before_line(song, 0) == ["F", "G"]
    assert bridge_before_line(song, 2) == ["C"]
    assert bridge_before_line(song, 1) is None


# ---------------------------------------------------------------------------
# Bridges
# ---------------------------------------------------------------------------


def test_add_bridge(song):
    result = add_bridge(song, 1)
    assert result.bridges == [["F", "G"], ["C"], []]
    assert result.bridge_positions == [0, 2, 1]
    assert song.bridge_positions == [0, 2]


def test_add_bridge_at_taken_position_is_noop(song):
    assert add_bridge(song, 0) is song


def test_remove_bridge(song):
    result = remove_bridge(song, 0)
    assert result.bridges == [["C"]]
    assert result.bridge_positions == [2]


def test_remove_bridge_out_of_range(song):
    assert remove_bridge(song, 5) is song


def test_append_to_bridge(song):
    result = append_to_bridge(song, 1, "G")
    assert result.bridges == [["F", "G"], ["C", "G"]]
    assert song.bridges == [["F", "G"], ["C"]]


def test_remove_from_bridge(song):
    result = remove_from_bridge(song, 0, 0)
    assert result.bridges == [["G"], ["C"]]
    assert song.bridges == [["F", "G"], ["C"]]


def test_remove_from_bridge_out_of_range(song):
    assert remove_from_bridge(song, 0, 9) is song
    assert remove_from_bridge(song, 9, 0) is song


# ---------------------------------------------------------------------------
# Intro
# ---------------------------------------------------------------------------


def test_append_to_intro(song):
    assert append_to_intro(song, "/").intro == ["Am", "G", "/"]
    assert song.intro == ["Am", "G"]


def test_remove_from_intro(song):
    assert remove_from_intro(song, 0).intro == ["G"]
    assert remove_from_intro(song, 2) is song


# ---------------------------------------------------------------------------
# edit_lyrics
# ---------------------------------------------------------------------------


def test_edit_lyrics_drops_orphaned_chords_and_bridges(song):
    result = edit_lyrics(song, "line one\nline two, edited")
    assert result.lyrics == "line one\nline two, edited"
    assert [c.line_index for c in result.chords] == [0, 1]
    assert result.bridges == [["F", "G"]]
    assert result.bridge_positions == [0]


def test_edit_lyrics_keeps_grid_positions(song):
    result = edit_lyrics(song, "completely different first line\nline two\nline three")
    assert result.chords == song.chords
