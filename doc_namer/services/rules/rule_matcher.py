"""Usage: evaluate an ordered rule set against OCR text and build a filename."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from doc_namer.core.config import settings
from doc_namer.core.exceptions import DateExtractionError, NoMatchError
from doc_namer.schemas.rules import Rule
from doc_namer.services.rules.date_extractor import extract_date

logger = logging.getLogger(__name__)

FILENAME_TEMPLATE = "{date} - {vendor}.pdf"


@dataclass(frozen=True)
class FilenameMatch:
    filename: str
    date: str
    vendor: str
    rule_index: int


def match_rules(
    text: str,
    rules: Sequence[Rule],
    *,
    default_vendor: str | None = None,
) -> FilenameMatch:
    """Return the filename from the first rule that matches and yields a date.

    Rules are tried strictly in order. A rule is skipped when either match
    pattern misses (or fails to compile) or its date cannot be extracted.
    Raises NoMatchError once every rule has been tried.
    """

    fallback_vendor = default_vendor or settings.default_vendor_label
    for index, rule in enumerate(rules):
        if not _search(rule.vendor_match_regex, text, index, "vendorMatchRegex"):
            continue
        if not _search(rule.additional_match_regex, text, index, "additionalMatchRegex"):
            logger.debug("Rule %d (%s): vendor matched, additional pattern did not", index, rule.label)
            continue

        try:
            date = extract_date(text, rule.date_extraction_regex, rule.date_formats)
        except DateExtractionError as exc:
            logger.info("Rule %d (%s): date extraction failed, trying next rule: %s", index, rule.label, exc)
            continue

        vendor = rule.vendor_label or fallback_vendor
        filename = FILENAME_TEMPLATE.format(date=date, vendor=vendor)
        logger.info("Rule %d (%s) matched: %s", index, rule.label, filename)
        return FilenameMatch(filename=filename, date=date, vendor=vendor, rule_index=index)

    raise NoMatchError(f"no matching rule found ({len(rules)} rules tried)", rules_tried=len(rules))


def suggest_filename(text: str, rules: Sequence[Rule], *, default_vendor: str | None = None) -> str:
    return match_rules(text, rules, default_vendor=default_vendor).filename


def _search(pattern: str, text: str, index: int, field: str) -> bool:
    try:
        return re.search(pattern, text) is not None
    except re.error as exc:
        logger.warning("Rule %d: %s %r is not a valid regex, skipping rule: %s", index, field, pattern, exc)
        return False
