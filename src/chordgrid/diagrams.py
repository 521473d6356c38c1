"""Guitar chord shapes for the "chords in this song" panel.

Shapes list one fret per string from low E to high E; ``-1`` is a muted
string and ``0`` an open one. Only common open shapes are known; other
chords fall back to a related shape (see :func:`shape_for`).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordShape:
    frets: tuple[int, ...]
    name: str


CHORD_SHAPES: dict[str, ChordShape] = {
    # Major
    "C": ChordShape((-1, 3, 2, 0, 1, 0), "C Major"),
    "D": ChordShape((-1, -1, 0, 2, 3, 2), "D Major"),
    "E": ChordShape((0, 2, 2, 1, 0, 0), "E Major"),
    "F": ChordShape((1, 3, 3, 2, 1, 1), "F Major"),
    "G": ChordShape((3, 2, 0, 0, 0, 3), "G Major"),
    "A": ChordShape((0, 0, 2, 2, 2, 0), "A Major"),
    "B": ChordShape((-1, 2, 4, 4, 4, 2), "B Major"),
    # Minor
    "Am": ChordShape((0, 0, 2, 2, 1, 0), "A Minor"),
    "Bm": ChordShape((-1, 2, 4, 4, 3, 2), "B Minor"),
    "Cm": ChordShape((-1, 3, 5, 5, 4, 3), "C Minor"),
    "Dm": ChordShape((-1, -1, 0, 2, 3, 1), "D Minor"),
    "Em": ChordShape((0, 2, 2, 0, 0, 0), "E Minor"),
    "Fm": ChordShape((1, 3, 3, 1, 1, 1), "F Minor"),
    "Gm": ChordShape((3, 5, 5, 3, 3, 3), "G Minor"),
    # Dominant 7th
    "A7": ChordShape((0, 0, 2, 0, 2, 0), "A7"),
    "B7": ChordShape((-1, 2, 1, 2, 0, 2), "B7"),
    "C7": ChordShape((0, 3, 2, 3, 1, 0), "C7"),
    "D7": ChordShape((-1, -1, 0, 2, 1, 2), "D7"),
    "E7": ChordShape((0, 2, 0, 1, 0, 0), "E7"),
    "F7": ChordShape((1, 3, 1, 2, 1, 1), "F7"),
    "G7": ChordShape((3, 2, 0, 0, 0, 1), "G7"),
}

_FRETS_SHOWN = 5


def shape_for(name: str) -> ChordShape:
    """Return the shape for *name*, falling back to a related one.

    Lookup order: exact name, root letter + "m", root letter, C.  The root
    letter is taken after stripping sharps and flats, so ``F#m7`` falls back
    to ``Fm``.
    """
    if name in CHORD_SHAPES:
        return CHORD_SHAPES[name]
    letter = name.replace("b", "").replace("#", "")[:1]
    return CHORD_SHAPES.get(letter + "m") or CHORD_SHAPES.get(letter) or CHORD_SHAPES["C"]


def render_diagram(name: str) -> str:
    """Return a small ASCII chord box for *name*.

    Example for ``Am``::

        Am
        o o       o
        |-|-|-|-|-|
        | | | | 1 |
        | | 2 2 | |
        | | | | | |
        | | | | | |
        | | | | | |
    """
    frets = shape_for(name).frets
    top = " ".join("x" if f == -1 else "o" if f == 0 else " " for f in frets).rstrip()
    rows = [name, top, "-".join("|" * len(frets))]
    for fret in range(1, _FRETS_SHOWN + 1):
        rows.append(" ".join(str(f) if f == fret else "|" for f in frets))
    return "\n".join(rows)
