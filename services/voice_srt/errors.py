"""Failures that abort a subtitle build.

Every error is terminal. Each carries a ``kind`` used in diagnostics and the
process exit code the CLI returns for it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class VoiceSrtError(RuntimeError):
    """Base class for all build failures."""

    kind = "VoiceSrtError"
    exit_code = 1


class PathNotFoundError(VoiceSrtError):
    kind = "PathNotFound"
    exit_code = 2

    def __init__(self, path: Path) -> None:
        super().__init__(f"input directory not found or not listable: {path}")
        self.path = path


class MissingAudioError(VoiceSrtError):
    kind = "MissingAudio"
    exit_code = 3

    def __init__(self, path: Path, ext: str) -> None:
        super().__init__(f"no .{ext} files in {path}")
        self.path = path


class MissingTextError(VoiceSrtError):
    kind = "MissingText"
    exit_code = 4

    def __init__(self, path: Path, ext: str) -> None:
        super().__init__(f"no .{ext} files in {path}")
        self.path = path


class CountMismatchError(VoiceSrtError):
    kind = "CountMismatch"
    exit_code = 5

    def __init__(self, path: Path, n_audio: int, n_text: int) -> None:
        super().__init__(
            f"audio and text counts differ in {path}: audio={n_audio} text={n_text}"
        )
        self.path = path
        self.n_audio = n_audio
        self.n_text = n_text


class UnpairedBlockError(VoiceSrtError):
    kind = "UnpairedBlock"
    exit_code = 6

    def __init__(self, prefix: str, missing: str) -> None:
        super().__init__(f"prefix {prefix} has no {missing} file")
        self.prefix = prefix
        self.missing = missing


class AmbiguousBlockError(VoiceSrtError):
    kind = "AmbiguousBlock"
    exit_code = 7

    def __init__(self, prefix: str, file_kind: str, paths: Iterable[Path]) -> None:
        self.paths = list(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"prefix {prefix} matches several {file_kind} files: {names}")
        self.prefix = prefix
        self.file_kind = file_kind


class AudioDecodeError(VoiceSrtError):
    kind = "AudioDecodeError"
    exit_code = 8

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read audio header of {path}: {reason}")
        self.path = path


class TextReadError(VoiceSrtError):
    kind = "TextReadError"
    exit_code = 9

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read text from {path}: {reason}")
        self.path = path


class WriteError(VoiceSrtError):
    kind = "WriteError"
    exit_code = 10

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot write {path}: {reason}")
        self.path = path


__all__ = [
    "VoiceSrtError",
    "PathNotFoundError",
    "MissingAudioError",
    "MissingTextError",
    "CountMismatchError",
    "UnpairedBlockError",
    "AmbiguousBlockError",
    "AudioDecodeError",
    "TextReadError",
    "WriteError",
]
