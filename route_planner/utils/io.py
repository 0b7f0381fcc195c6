"""File IO utilities."""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path

import chardet

from ..core.exceptions import RoutePlannerError


def detect_encoding(raw: bytes) -> str:
    """Guess the text encoding of ``raw``."""

    detection = chardet.detect(raw)
    return detection.get("encoding") or "utf-8"


def read_text(path: os.PathLike[str] | str, *, encoding: str = "utf-8-sig", max_bytes: int | None = None) -> str:
    """Read a text file, optionally detecting its encoding with ``"auto"``."""

    path = Path(path)
    if not path.exists():
        raise RoutePlannerError(f"CSV file not found: {path}", details={"path": str(path)})

    size = path.stat().st_size
    if max_bytes is not None and size > max_bytes:
        raise RoutePlannerError(
            "CSV file exceeds the maximum allowed size",
            details={"path": str(path), "size": size, "limit": max_bytes},
        )

    raw = path.read_bytes()
    if encoding == "auto":
        encoding = detect_encoding(raw)
    return raw.decode(encoding, errors="replace")


def safe_filename(filename: str) -> str:
    """Return a filesystem safe filename."""

    normalized = unicodedata.normalize("NFKD", filename)
    sanitized = [c for c in normalized if c.isalnum() or c in {"-", "_", "."}]
    return "".join(sanitized).lstrip(".")


def ensure_directory(path: os.PathLike[str] | str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory
