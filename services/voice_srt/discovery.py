"""Find the audio and transcript files that make up a subtitle build."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from shared.config import settings
from shared.logging import log_info
from shared.types import FileEntry, FileKind

from .errors import (
    CountMismatchError,
    MissingAudioError,
    MissingTextError,
    PathNotFoundError,
)

_LEADING_DIGITS = re.compile(r"^[0-9]*")


def leading_digits(name: str) -> str:
    """Return the ASCII digits ``name`` starts with (may be empty)."""
    return _LEADING_DIGITS.match(name).group(0)


def _kind_for(path: Path, audio_ext: str, text_ext: str) -> FileKind | None:
    ext = path.suffix[1:]
    if ext == audio_ext:
        return FileKind.AUDIO
    if ext == text_ext:
        return FileKind.TEXT
    return None


def discover_files(
    directory: Path,
    audio_ext: str | None = None,
    text_ext: str | None = None,
) -> List[FileEntry]:
    """Return audio and text files directly inside ``directory``.

    Extensions are matched case-sensitively. Sub-directories and files with
    any other extension are skipped. Entries are sorted by file name.

    Raises ``PathNotFoundError``, ``MissingAudioError``, ``MissingTextError``
    or ``CountMismatchError`` (checked in that order).
    """

    audio_ext = (audio_ext or settings.AUDIO_EXT).lstrip(".")
    text_ext = (text_ext or settings.TEXT_EXT).lstrip(".")

    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        raise PathNotFoundError(directory) from exc

    entries: List[FileEntry] = []
    for item in children:
        if not item.is_file():
            continue
        kind = _kind_for(item, audio_ext, text_ext)
        if kind is None:
            continue
        entries.append(FileEntry(path=item, kind=kind, prefix=leading_digits(item.name)))

    n_audio = sum(1 for e in entries if e.kind is FileKind.AUDIO)
    n_text = len(entries) - n_audio
    if n_audio == 0:
        raise MissingAudioError(directory, audio_ext)
    if n_text == 0:
        raise MissingTextError(directory, text_ext)
    if n_audio != n_text:
        raise CountMismatchError(directory, n_audio, n_text)

    log_info("discover", input_dir=directory, audio=n_audio, text=n_text)
    return entries


__all__ = ["discover_files", "leading_digits"]
