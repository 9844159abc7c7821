"""Turn discovered files into timed subtitle blocks.

Blocks are built by walking the zero-padded prefixes ``000``, ``001``, ...
and pairing the audio and text file found under each one. The walk stops at
the first prefix with no files. Each block starts where the previous one
ended; the running clock lives inside :func:`iter_blocks` and is never shared.
"""

from __future__ import annotations

import wave
from datetime import timedelta
from fractions import Fraction
from typing import Iterator, List, Sequence

from shared.config import settings
from shared.logging import log_debug, log_info
from shared.types import FileEntry, FileKind, SubtitleBlock

from .errors import (
    AmbiguousBlockError,
    AudioDecodeError,
    TextReadError,
    UnpairedBlockError,
)


def iter_prefixes(width: int, limit: int) -> Iterator[str]:
    """Yield ``limit`` prefixes zero-padded to at least ``width`` digits."""
    for i in range(limit):
        yield f"{i:0{width}d}"


def _to_timedelta(seconds: Fraction) -> timedelta:
    return timedelta(microseconds=int(seconds * 1_000_000))


def wav_duration(entry: FileEntry) -> Fraction:
    """Return the exact length in seconds of a WAV file from its header."""
    try:
        with wave.open(str(entry.path), "rb") as wf:
            frames = wf.getnframes()
            rate = wf.getframerate()
    except (wave.Error, EOFError, OSError) as exc:
        raise AudioDecodeError(entry.path, str(exc) or exc.__class__.__name__) from exc
    if rate <= 0:
        raise AudioDecodeError(entry.path, f"invalid sample rate {rate}")
    return Fraction(frames, rate)


def read_text(entry: FileEntry, encoding: str | None = None) -> str:
    """Return the full contents of a transcript, line endings included."""
    try:
        with open(entry.path, encoding=encoding or settings.TEXT_ENCODING, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TextReadError(entry.path, str(exc)) from exc


def _pick(prefix: str, matched: Sequence[FileEntry], kind: FileKind) -> FileEntry:
    hits = [e for e in matched if e.kind is kind]
    if not hits:
        raise UnpairedBlockError(prefix, kind.value)
    if len(hits) > 1:
        raise AmbiguousBlockError(prefix, kind.value, [e.path for e in hits])
    return hits[0]


def iter_blocks(
    entries: Sequence[FileEntry], width: int | None = None
) -> Iterator[SubtitleBlock]:
    """Lazily yield blocks for ``entries`` in index order.

    A file belongs to a prefix when its name starts with the padded digits
    and the next character is not a digit, so ``000_a.wav`` pairs under
    ``000`` but ``0001.wav`` does not. There can be no more pairs than
    entries, which bounds the walk.
    """

    width = width or settings.PREFIX_WIDTH
    # Exact seconds; only the per-block timedelta is truncated to microseconds.
    clock = Fraction(0)
    for i, prefix in enumerate(iter_prefixes(width, len(entries))):
        matched = [e for e in entries if e.prefix == prefix]
        if not matched:
            return

        audio = _pick(prefix, matched, FileKind.AUDIO)
        text = _pick(prefix, matched, FileKind.TEXT)

        start = _to_timedelta(clock)
        clock += wav_duration(audio)
        end = _to_timedelta(clock)

        block = SubtitleBlock(index=i + 1, start=start, end=end, text=read_text(text))
        log_debug(
            "block",
            index=block.index,
            prefix=prefix,
            audio=audio.path,
            text=text.path,
            start_s=start.total_seconds(),
            end_s=end.total_seconds(),
        )
        yield block


def assemble_blocks(
    entries: Sequence[FileEntry], width: int | None = None
) -> List[SubtitleBlock]:
    """Return every block for ``entries``; see :func:`iter_blocks`."""

    blocks = list(iter_blocks(entries, width))
    total = blocks[-1].end if blocks else timedelta(0)
    log_info("assembled", blocks=len(blocks), duration_s=total.total_seconds())
    return blocks


__all__ = ["assemble_blocks", "iter_blocks", "iter_prefixes", "read_text", "wav_duration"]
