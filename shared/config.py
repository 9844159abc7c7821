"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

load_dotenv()


# Default destination when ``--output-path`` is not given.
# The environment variable overrides this default.
OUTPUT_PATH = Path(os.getenv("VOICE_SRT_OUTPUT_PATH", "./subtitles.srt"))


class Settings(BaseSettings):
    """Application settings read from environment variables."""

    OUTPUT_PATH: Path = Field(
        default=OUTPUT_PATH,
        description="Where the subtitle file is written",
        validation_alias=AliasChoices("VOICE_SRT_OUTPUT_PATH", "OUTPUT_PATH"),
    )
    AUDIO_EXT: str = Field(
        default="wav", description="Extension of the audio half of a pair"
    )
    TEXT_EXT: str = Field(
        default="txt", description="Extension of the transcript half of a pair"
    )
    PREFIX_WIDTH: int = Field(
        default=3, description="Minimum width of the zero-padded index prefix"
    )
    TEXT_ENCODING: str = Field(
        default="utf-8", description="Encoding used to read transcripts"
    )
    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level"
    )

    @field_validator("AUDIO_EXT", "TEXT_EXT")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".")

    @field_validator("PREFIX_WIDTH")
    @classmethod
    def _positive_width(cls, value: int) -> int:
        if value < 1:
            raise ValueError("PREFIX_WIDTH must be at least 1")
        return value


settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "OUTPUT_PATH",
]
