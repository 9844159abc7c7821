"""Subtitle builder components."""

__version__ = "0.1.0"

from . import assembler, discovery, errors, serializer  # noqa: E402

__all__ = ["assembler", "discovery", "errors", "serializer", "__version__"]
