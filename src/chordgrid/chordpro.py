"""ChordPro export.

Renders a :class:`~chordgrid.models.Song` to ChordPro (``.cho``) text with
every chord transposed by the requested pitch offset.

Song part → ChordPro mapping
----------------------------

+--------------------------------------+------------------------------------+
| Song part                            | ChordPro output                    |
+======================================+====================================+
| ``title``, ``artist``, ``key``       | ``{title: ...}``, ``{artist: ...}``|
|                                      | ``{key: ...}`` (key transposed)    |
+--------------------------------------+------------------------------------+
| ``intro`` chords                     | ``{comment: Intro: Am / G}``       |
+--------------------------------------+------------------------------------+
| a bridge                             | ``{comment: Bridge: F / G}`` right |
|                                      | before the line it precedes        |
+--------------------------------------+------------------------------------+
| grid placements                      | ``[Am]`` inline at the character   |
|                                      | offset of the chord's grid slot    |
+--------------------------------------+------------------------------------+

Usage::

    from chordgrid.chordpro import ChordProFormatter
    formatter = ChordProFormatter()
    text = formatter.render(song, semitones=2)
    Path("output.cho").write_text(text)
"""

from .grid import placements_for_line, to_char_offset
from .models import ChordPlacement, Song
from .sections import bridge_before_line, format_chord_sequence
from .transpose import transpose


class ChordProFormatter:
    """Render a :class:`~chordgrid.models.Song` to ChordPro text."""

    def __init__(self, normalize: bool = False):
        self.normalize = normalize

    def render(self, song: Song, semitones: int = 0) -> str:
        """Return ChordPro text for *song* transposed by *semitones*.

        The returned string ends with a single newline and uses Unix line
        endings (``\\n``) throughout.
        """
        parts: list[str] = []

        # --- Metadata block ---
        parts.append(f"{{title: {song.title}}}")
        parts.append(f"{{artist: {song.artist}}}")
        if song.key:
            parts.append(f"{{key: {transpose(song.key, semitones, self.normalize)}}}")

        if song.intro:
            parts.append("")
            intro = format_chord_sequence(song.intro, semitones, self.normalize)
            parts.append(f"{{comment: Intro: {intro}}}")

        # --- Lyrics ---
        parts.append("")
        for line_index, line in enumerate(song.lines):
            bridge = bridge_before_line(song, line_index)
            if bridge:
                sequence = format_chord_sequence(bridge, semitones, self.normalize)
                parts.append(f"{{comment: Bridge: {sequence}}}")
            chords = placements_for_line(song.chords, line_index)
            parts.append(self._inline(line, chords, semitones))

        return "\n".join(parts) + "\n"

    def _inline(self, line: str, chords: list[ChordPlacement], semitones: int) -> str:
        """Insert ``[Chord]`` brackets into *line* at each chord's slot offset."""
        result = line
        inserted = 0  # total characters inserted so far (adjusts all future offsets)

        for chord in chords:
            bracket = f"[{transpose(chord.name, semitones, self.normalize)}]"
            pos = to_char_offset(line, chord.grid_position) + inserted
            result = result[:pos] + bracket + result[pos:]
            inserted += len(bracket)

        return result
