"""Command line entry point for building an SRT file from numbered voice clips."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from shared.config import settings
from shared.logging import log_error, log_info, log_warn

from . import __version__
from .assembler import assemble_blocks
from .discovery import discover_files
from .errors import VoiceSrtError
from .serializer import write_srt

app = typer.Typer(add_completion=False, help="Build subtitles from numbered wav/txt pairs")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"voice-srt {__version__}")
        raise typer.Exit()


def build(input_path: Path, output_path: Path, width: int | None = None) -> Path:
    """Discover, assemble and write; returns the written path."""

    entries = discover_files(input_path)
    blocks = assemble_blocks(entries, width)
    if not blocks:
        log_warn("no_blocks", input_dir=input_path, width=width or settings.PREFIX_WIDTH)
    return write_srt(blocks, output_path)


@app.command()
def main(
    input_path: Path = typer.Option(
        ..., "--input-path", "-i", help="Directory holding the wav/txt pairs"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output-path", "-o", help="Subtitle file to write (default ./subtitles.srt)"
    ),
    width: Optional[int] = typer.Option(
        None, "--width", min=1, help="Minimum digits in the index prefix (default 3)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Write one subtitle block per numbered clip, timed by the clip lengths."""

    dest = output_path or settings.OUTPUT_PATH
    log_info("start", input_dir=input_path, output_path=dest)
    try:
        written = build(input_path, dest, width)
    except VoiceSrtError as exc:
        log_error("error", kind=exc.kind, error_message=str(exc))
        typer.echo(f"{exc.kind}: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code)
    typer.echo(f"Wrote {written}")


if __name__ == "__main__":  # pragma: no cover
    app()
