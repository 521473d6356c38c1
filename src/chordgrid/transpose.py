"""Chord symbol parsing and transposition.

A chord symbol is a root note, a free-form suffix and an optional bass note
after a single ``/``::

    F#m7/A  ->  root "F#", suffix "m7", bass "A"

Only the root and bass move when transposing; the suffix is kept verbatim.
Anything that does not start with a recognized root passes through
unchanged, so custom labels typed by users never break rendering.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .models import SEPARATOR

PITCH_NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Root is a capital letter optionally followed by an accidental. A flat root
# such as "Bb" matches but is not in PITCH_NOTES, so it passes through
# instead of being read as root "B" with suffix "b"; see normalize_flats().
_ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)

# Flat roots and their sharp spelling. Cb and Fb wrap to B and E.
_FLAT_TO_SHARP = {
    "Cb": "B",
    "Db": "C#",
    "Eb": "D#",
    "Fb": "E",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}


@dataclass(frozen=True)
class ParsedChord:
    """A chord symbol split into its transposable parts."""

    root: str
    suffix: str = ""
    bass: "ParsedChord | None" = None

    def __str__(self) -> str:
        text = self.root + self.suffix
        if self.bass is not None:
            text += f"/{self.bass}"
        return text

    def transposed(self, semitones: int) -> "ParsedChord":
        bass = self.bass.transposed(semitones) if self.bass is not None else None
        return ParsedChord(_shift(self.root, semitones), self.suffix, bass)


def note_index(note: str) -> int | None:
    """Return the semitone offset of *note* from C, or None if unknown."""
    try:
        return PITCH_NOTES.index(note)
    except ValueError:
        return None


def _shift(root: str, semitones: int) -> str:
    index = note_index(root)
    if index is None:
        return root
    return PITCH_NOTES[((index + semitones) % 12 + 12) % 12]


def normalize_flats(symbol: str) -> str:
    """Respell flat roots (and a flat bass) as sharps: ``Bbm7/Db`` → ``A#m7/C#``.

    Symbols without a flat root are returned unchanged.
    """
    if symbol == SEPARATOR or symbol.count("/") > 1:
        return symbol
    if "/" in symbol:
        base, bass = symbol.split("/")
        return f"{normalize_flats(base)}/{normalize_flats(bass)}"
    sharp = _FLAT_TO_SHARP.get(symbol[:2])
    if sharp is None:
        return symbol
    return sharp + symbol[2:]


def _parse_simple(symbol: str) -> ParsedChord | None:
    m = _ROOT_RE.match(symbol)
    if not m:
        return None
    root, suffix = m.groups()
    if note_index(root) is None:
        return None
    return ParsedChord(root, suffix)


def parse_chord(symbol: str, normalize: bool = False) -> ParsedChord | None:
    """Parse *symbol* into a :class:`ParsedChord`.

    Returns None for the separator token, for symbols with more than one
    ``/`` and for symbols whose root (or bass) is not recognized.  With
    *normalize* set, flat roots are respelled as sharps before matching.
    """
    if symbol == SEPARATOR:
        return None
    if normalize:
        symbol = normalize_flats(symbol)
    slashes = symbol.count("/")
    if slashes > 1:
        return None
    if slashes == 1:
        base, bass = symbol.split("/")
        parsed_base = _parse_simple(base)
        parsed_bass = _parse_simple(bass)
        if parsed_base is None or parsed_bass is None:
            return None
        return ParsedChord(parsed_base.root, parsed_base.suffix, parsed_bass)
    return _parse_simple(symbol)


def transpose(symbol: str, semitones: int, normalize: bool = False) -> str:
    """Return *symbol* moved by *semitones* (any sign or size).

    Rules, in order:

    - a zero shift returns *symbol* unchanged;
    - the separator ``/`` is returned unchanged;
    - a slash chord transposes its two halves independently, so an
      unrecognized half is kept as typed while the other half moves;
    - symbols with more than one ``/`` are returned unchanged;
    - symbols without a recognized root are returned unchanged.

    Example::

        >>> transpose("C/E", 2)
        'D/F#'
    """
    if semitones == 0:
        return symbol
    if symbol == SEPARATOR:
        return symbol
    if normalize:
        symbol = normalize_flats(symbol)
    slashes = symbol.count("/")
    if slashes > 1:
        return symbol
    if slashes == 1:
        base, bass = symbol.split("/")
        return f"{transpose(base, semitones)}/{transpose(bass, semitones)}"

    parsed = _parse_simple(symbol)
    if parsed is None:
        return symbol
    return str(parsed.transposed(semitones))


def transpose_all(symbols: Iterable[str], semitones: int, normalize: bool = False) -> list[str]:
    return [transpose(s, semitones, normalize) for s in symbols]


def unique_chords(
    symbols: Iterable[str], semitones: int = 0, normalize: bool = False
) -> list[str]:
    """Return the distinct transposed chord names in first-seen order.

    The separator token is left out; it is not a chord.
    """
    seen: dict[str, None] = {}
    for name in transpose_all(symbols, semitones, normalize):
        if name != SEPARATOR:
            seen.setdefault(name, None)
    return list(seen)


def format_offset(semitones: int) -> str:
    """Display a pitch offset the way the pitch stepper shows it: ``+2``, ``-1``, ``0``."""
    return f"+{semitones}" if semitones > 0 else str(semitones)
