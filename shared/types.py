"""Shared data types for the subtitle builder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path


class FileKind(str, Enum):
    """Which half of a pair a discovered file supplies."""

    AUDIO = "audio"
    TEXT = "text"


@dataclass(frozen=True)
class FileEntry:
    """A file found by discovery."""

    path: Path
    kind: FileKind
    prefix: str

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class SubtitleBlock:
    """One caption: index, time range and text."""

    index: int
    start: timedelta
    end: timedelta
    text: str
