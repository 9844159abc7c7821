"""SRT rendering with atomic output."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Iterable, List

from shared.logging import log_error, log_info
from shared.types import SubtitleBlock

from .errors import WriteError

_MICROSECOND = timedelta(microseconds=1)

TIME_RE = re.compile(
    r"^(\d{2,}):(\d{2}):(\d{2}),(\d{3}) --> (\d{2,}):(\d{2}):(\d{2}),(\d{3})$"
)


def format_timestamp(offset: timedelta) -> str:
    """Return ``HH:MM:SS,mmm`` for ``offset``; milliseconds are truncated."""

    micros = offset // _MICROSECOND
    secs, rem = divmod(micros, 1_000_000)
    hours = secs // 3600
    minutes = (secs % 3600) // 60
    seconds = secs % 60
    millis = rem // 1000
    return f"{hours:02}:{minutes:02}:{seconds:02},{millis:03}"


def _parse_timestamp(h: str, m: str, s: str, ms: str) -> timedelta:
    return timedelta(hours=int(h), minutes=int(m), seconds=int(s), milliseconds=int(ms))


def render_srt(blocks: Iterable[SubtitleBlock]) -> str:
    """Render ``blocks`` in order, trimming trailing whitespace once at the end."""

    parts: List[str] = []
    for block in blocks:
        start = format_timestamp(block.start)
        end = format_timestamp(block.end)
        parts.append(f"{block.index}\n{start} --> {end}\n{block.text}\n\n")
    return "".join(parts).rstrip()


def parse_srt(raw: str) -> List[SubtitleBlock]:
    """Split rendered SRT on blank lines and read each block back.

    Times come back at millisecond precision.
    """

    blocks: List[SubtitleBlock] = []
    for chunk in re.split(r"\n\s*\n", raw.strip()):
        if not chunk.strip():
            continue
        lines = chunk.split("\n")
        if len(lines) < 2:
            raise ValueError(f"Invalid SRT block: {chunk!r}")
        mt = TIME_RE.match(lines[1])
        if not mt:
            raise ValueError(f"Invalid time range: {lines[1]!r}")
        blocks.append(
            SubtitleBlock(
                index=int(lines[0]),
                start=_parse_timestamp(*mt.group(1, 2, 3, 4)),
                end=_parse_timestamp(*mt.group(5, 6, 7, 8)),
                text="\n".join(lines[2:]),
            )
        )
    return blocks


def write_srt(blocks: Iterable[SubtitleBlock], dest: Path) -> Path:
    """Render ``blocks`` and write them to ``dest``.

    Writes to a hidden sibling first, fsyncs, then atomically renames over
    ``dest``. The parent directory must already exist. Raises ``WriteError``
    on any OS failure.
    """

    blocks = list(blocks)
    body = render_srt(blocks)
    tmp_path = dest.with_name(f".{dest.name}.tmp")

    try:
        with open(tmp_path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(body)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, dest)
    except OSError as exc:
        log_error("write_fail", path=dest, error=str(exc))
        tmp_path.unlink(missing_ok=True)
        raise WriteError(dest, str(exc)) from exc

    log_info("write", path=dest, blocks=len(blocks), bytes=len(body.encode("utf-8")))
    return dest


__all__ = ["format_timestamp", "render_srt", "parse_srt", "write_srt", "TIME_RE"]
