"""Whitelist of file extensions the remote may browse as music."""

from collections.abc import Iterable

DEFAULT_MUSIC_EXTENSIONS = ["aac", "alac", "flac", "m3u", "m4a", "mp3", "ogg", "wav", "wmv"]

# Entries must be strictly shorter than this after trimming
MAX_EXTENSION_LENGTH = 8


def filter_extensions(values: Iterable[str]) -> list[str]:
    """Trim each entry and keep those of one to seven characters, in order."""
    extensions: list[str] = []
    for value in values:
        ext = str(value).strip()
        if 0 < len(ext) < MAX_EXTENSION_LENGTH:
            extensions.append(ext)
    return extensions


def parse_extension_list(raw: str | None) -> list[str]:
    """Split comma-separated text into a list of extensions.

    Pieces are trimmed; empty pieces and pieces of eight characters or more
    are dropped. Order of appearance is kept.
    """
    return filter_extensions((raw or "").split(","))


def join_extension_list(extensions: list[str]) -> str:
    return ",".join(extensions)
