from __future__ import annotations

import locale
from typing import Iterator

import pytest

from doc_namer.core.exceptions import DateExtractionError
from doc_namer.services.rules.date_extractor import extract_date

LONG_DATE = r"([A-Za-z]+ \d{1,2}, \d{4})"


def test_extract_date_canonicalizes_long_form_date() -> None:
    assert extract_date("Invoice date: January 2, 2006", LONG_DATE) == "20060102"


def test_extract_date_zero_pads_years_below_1000() -> None:
    assert extract_date("Date: January 2, 0999", LONG_DATE) == "09990102"


def test_extract_date_uses_first_match() -> None:
    text = "Issued: March 5, 2023\nDue: April 4, 2023"

    assert extract_date(text, LONG_DATE) == "20230305"


def test_extract_date_accepts_custom_formats() -> None:
    text = "Statement date 5 March 2023"

    result = extract_date(text, r"(\d{1,2} [A-Za-z]+ \d{4})", formats=("%B %d, %Y", "%d %B %Y"))

    assert result == "20230305"


@pytest.mark.parametrize(
    ("text", "regex"),
    [
        ("no date here", LONG_DATE),
        ("Date: March 5, 2023", r"Date: [A-Za-z]+ \d{1,2}, \d{4}"),
        ("Date: 5 March 2023", r"Date: (.+)"),
        ("Date: Smarch 5, 2023", LONG_DATE),
        ("Date: February 30, 2023", LONG_DATE),
        ("Date: March 5, 2023", r"Date: ([A-Z"),
    ],
    ids=["no-match", "no-group", "wrong-format", "unknown-month", "impossible-day", "bad-regex"],
)
def test_extract_date_failures_raise(text: str, regex: str) -> None:
    with pytest.raises(DateExtractionError):
        extract_date(text, regex)


def test_extract_date_rejects_group_that_did_not_participate() -> None:
    with pytest.raises(DateExtractionError):
        extract_date("Date: pending", r"Date: (?:([A-Za-z]+ \d{1,2}, \d{4})|pending)")


@pytest.fixture
def c_time_locale() -> Iterator[None]:
    previous = locale.setlocale(locale.LC_TIME)
    locale.setlocale(locale.LC_TIME, "C")
    yield
    locale.setlocale(locale.LC_TIME, previous)


def test_extract_date_parses_english_month_names_under_c_locale(c_time_locale: None) -> None:
    assert extract_date("Date: September 30, 2024", LONG_DATE) == "20240930"
    assert extract_date("Date: sep 3, 2024", r"Date: ([a-z]+ \d{1,2}, \d{4})", formats=("%b %d, %Y",)) == "20240903"
