"""Playlist edits. Each entry keeps its own pitch offset, so the same song
can be played in different keys in different playlists."""

from dataclasses import replace

from .models import Playlist, PlaylistEntry


def add_song(playlist: Playlist, song_id: str) -> Playlist:
    if any(e.song_id == song_id for e in playlist.entries):
        return playlist
    return replace(playlist, entries=[*playlist.entries, PlaylistEntry(song_id)])


def remove_song(playlist: Playlist, song_id: str) -> Playlist:
    return replace(playlist, entries=[e for e in playlist.entries if e.song_id != song_id])


def adjust_pitch(playlist: Playlist, song_id: str, delta: int) -> Playlist:
    """Move one entry's pitch offset by *delta* semitones."""
    entries = [
        replace(e, pitch=e.pitch + delta) if e.song_id == song_id else e
        for e in playlist.entries
    ]
    return replace(playlist, entries=entries)


def pitch_for(playlist: Playlist, song_id: str) -> int:
    for e in playlist.entries:
        if e.song_id == song_id:
            return e.pitch
    return 0
