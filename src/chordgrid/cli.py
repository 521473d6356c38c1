import logging
import sys
from pathlib import Path

import click

from .chordpro import ChordProFormatter
from .diagrams import render_diagram
from .exceptions import ChordGridError, FetchError
from .grid import to_grid_position
from .models import Song
from .registry import get_source
from .render import render_text
from .transpose import format_offset, transpose, unique_chords

_transpose_option = click.option(
    "-t", "--transpose", "semitones", type=int, default=0, show_default=True,
    envvar="CHORDGRID_TRANSPOSE",
    help="Pitch offset in semitones (negative to go down).",
)
_normalize_option = click.option(
    "--normalize-flats", "normalize", is_flag=True, default=False,
    help="Respell flat roots as sharps (Bb -> A#) so they transpose too.",
)


def _fail(exc: ChordGridError) -> None:
    msg = f"Error: {exc}"
    if isinstance(exc, FetchError) and exc.status_code == 403:
        msg += " (access denied by the server)"
    click.echo(msg, err=True)
    sys.exit(1)


def _load_song(location: str) -> Song:
    try:
        return get_source(location).load(location)
    except ChordGridError as exc:
        _fail(exc)


def _render(song: Song, output_format: str, semitones: int, normalize: bool) -> str:
    if output_format == "chordpro":
        return ChordProFormatter(normalize=normalize).render(song, semitones)
    return render_text(song, semitones, normalize=normalize)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log dropped or repaired records to stderr.")
def main(verbose: bool) -> None:
    """Place, transpose and print song chords."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("location")
@_transpose_option
@_normalize_option
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "chordpro"]),
              default="text", show_default=True, help="Output format.")
@click.option("--diagrams", is_flag=True, default=False,
              help="Append guitar diagrams for every chord in the song.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
def show(location: str, semitones: int, normalize: bool, output_format: str,
         diagrams: bool, output_path: str | None) -> None:
    """Print the song at LOCATION (a JSON file or an http(s) URL).

    \b
    Examples:
      chordgrid show song.json -t 2
      chordgrid show https://example.com/songs/42.json --format chordpro
    """
    song = _load_song(location)
    text = _render(song, output_format, semitones, normalize)

    if diagrams:
        names = unique_chords((p.name for p in song.chords), semitones, normalize)
        if names:
            text += "\n" + "\n\n".join(render_diagram(n) for n in names) + "\n"

    if output_path:
        dest = Path(output_path)
        dest.write_text(text, encoding="utf-8")
        click.echo(f"Written to {dest}")
        return
    click.echo(text, nl=False)


@main.command("transpose")
@click.argument("chords", nargs=-1, required=True)
@_transpose_option
@_normalize_option
def transpose_command(chords: tuple[str, ...], semitones: int, normalize: bool) -> None:
    """Transpose chord symbols and print them space-separated."""
    click.echo(" ".join(transpose(c, semitones, normalize) for c in chords))


@main.command()
@click.argument("line")
@click.argument("offset", type=click.IntRange(min=0))
def grid(line: str, offset: int) -> None:
    """Print the grid slot for character OFFSET within LINE."""
    click.echo(to_grid_position(line, offset))


@main.command()
@click.argument("location")
@click.option("--songs-dir", type=click.Path(exists=True, file_okay=False), default=None,
              help="Directory of <song id>.json files; renders each song at its pitch.")
@_normalize_option
def playlist(location: str, songs_dir: str | None, normalize: bool) -> None:
    """List the songs of the playlist at LOCATION with their pitch offsets."""
    try:
        pl = get_source(location).load_playlist(location)
    except ChordGridError as exc:
        _fail(exc)

    click.echo(pl.name)
    for number, entry in enumerate(pl.entries, start=1):
        click.echo(f"{number}. {entry.song_id} ({format_offset(entry.pitch)})")
        if songs_dir:
            song = _load_song(str(Path(songs_dir) / f"{entry.song_id}.json"))
            click.echo()
            click.echo(render_text(song, entry.pitch, normalize=normalize), nl=False)
