import wave
from pathlib import Path
from typing import Callable

import pytest


def _write_wav(path: Path, frames: int, sr: int = 16000, channels: int = 1) -> Path:
    """Write a silent 16-bit PCM wav with ``frames`` frames."""
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(2)
        wf.setframerate(sr)
        wf.writeframes(b"\x00\x00" * channels * frames)
    return path


@pytest.fixture
def write_wav() -> Callable[..., Path]:
    return _write_wav


@pytest.fixture
def voice_dir(tmp_path: Path) -> Path:
    path = tmp_path / "voice"
    path.mkdir()
    return path


@pytest.fixture
def make_pair(voice_dir: Path) -> Callable[..., Path]:
    """Return a helper that drops a wav/txt pair into ``voice_dir``."""

    def _make(stem: str, seconds: float, text: str, sr: int = 16000) -> Path:
        _write_wav(voice_dir / f"{stem}.wav", int(round(seconds * sr)), sr=sr)
        (voice_dir / f"{stem}.txt").write_text(text, encoding="utf-8")
        return voice_dir

    return _make
