"""Usage: pull a date out of OCR text and render it as YYYYMMDD."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Sequence

from doc_namer.core.exceptions import DateExtractionError
from doc_namer.schemas.rules import DEFAULT_DATE_FORMATS


def extract_date(
    text: str,
    date_regex: str,
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> str:
    """Return the first date captured by ``date_regex`` in canonical form.

    Group 1 of the first match is parsed with each of ``formats`` in turn.
    Raises DateExtractionError when the pattern is invalid, finds nothing,
    has no capture group, or the captured text fits none of the formats.

    Month names (%B, %b) are matched by strptime against the LC_TIME locale,
    which is "C" (English) unless the host process calls setlocale.
    """

    try:
        pattern = re.compile(date_regex)
    except re.error as exc:
        raise DateExtractionError(f"invalid date regex {date_regex!r}: {exc}") from exc

    match = pattern.search(text)
    if match is None:
        raise DateExtractionError("date not found")
    if pattern.groups < 1 or match.group(1) is None:
        raise DateExtractionError(f"date regex {date_regex!r} has no capture group")

    raw_value = match.group(1).strip()
    parsed = _parse_date(raw_value, formats)
    if parsed is None:
        raise DateExtractionError(f"cannot parse date {raw_value!r} with formats {list(formats)}")
    # strftime("%Y") does not zero-pad years below 1000 on glibc
    return f"{parsed.year:04d}{parsed.month:02d}{parsed.day:02d}"


def _parse_date(value: str, formats: Sequence[str]) -> datetime | None:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None
