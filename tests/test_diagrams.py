from chordgrid.diagrams import CHORD_SHAPES, render_diagram, shape_for


def test_exact_shape():
    assert shape_for("Am").name == "A Minor"
    assert shape_for("G7").frets == (3, 2, 0, 0, 0, 1)


def test_fallback_to_minor_of_root_letter():
    assert shape_for("F#m7").name == "F Minor"


def test_fallback_strips_accidentals():
    assert shape_for("Bb") is CHORD_SHAPES["Bm"]


def test_fallback_to_c():
    assert shape_for("N.C.") is CHORD_SHAPES["C"]


def test_every_shape_has_six_strings():
    assert all(len(s.frets) == 6 for s in CHORD_SHAPES.values())


def test_render_diagram_am():
    lines = render_diagram("Am").splitlines()
    assert lines[0] == "Am"
    assert lines[2] == "|-|-|-|-|-|"
    assert lines[3] == "| | | | 1 |"
    assert lines[4] == "| | 2 2 | |"
    assert len(lines) == 8


def test_render_diagram_marks_muted_and_open_strings():
    assert render_diagram("D").splitlines()[1] == "x x o"
