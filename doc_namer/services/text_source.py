"""Usage: read OCR output text from disk."""

from __future__ import annotations

from pathlib import Path

from doc_namer.core.exceptions import InputReadError


def read_ocr_text(path: Path | str) -> str:
    source = Path(path)
    try:
        return source.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputReadError(f"OCR text file {source}: cannot read: {exc}") from exc
