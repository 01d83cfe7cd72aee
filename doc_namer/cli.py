"""Usage: doc-namer <rules.json> <ocr-output.txt>

Print the suggested filename for a scanned document's OCR text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from doc_namer.core.config import settings
from doc_namer.core.exceptions import ConfigLoadError, InputReadError, NoMatchError
from doc_namer.core.logging import setup_logging
from doc_namer.services.rules.rule_loader import load_rules
from doc_namer.services.rules.rule_matcher import suggest_filename
from doc_namer.services.text_source import read_ocr_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doc-namer",
        description="Suggest a '<YYYYMMDD> - <vendor>.pdf' filename from OCR text using matching rules.",
    )
    parser.add_argument("rules_file", type=Path, help="JSON file with a 'rules' list")
    parser.add_argument("ocr_file", type=Path, help="Text file with the OCR output")
    parser.add_argument(
        "--vendor-label",
        default=None,
        help=f"Vendor label for rules without one (default: {settings.default_vendor_label})",
    )
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {settings.log_level})")
    parser.add_argument("--log-dir", type=Path, default=None, help=f"Log directory (default: {settings.log_dir})")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_dir=args.log_dir)

    try:
        rules = load_rules(args.rules_file)
    except ConfigLoadError as exc:
        logger.error("Error loading rules: %s", exc)
        return EXIT_CONFIG_ERROR

    try:
        ocr_text = read_ocr_text(args.ocr_file)
    except InputReadError as exc:
        logger.error("Error reading OCR output: %s", exc)
        return EXIT_CONFIG_ERROR

    try:
        filename = suggest_filename(ocr_text, rules, default_vendor=args.vendor_label)
    except NoMatchError as exc:
        logger.error("Error applying rules to %s: %s", args.ocr_file, exc)
        return EXIT_NO_MATCH

    print(filename)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
