import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# "January 2, 2006"; %B follows LC_TIME, English under the default "C" locale
DEFAULT_DATE_FORMATS: tuple[str, ...] = ("%B %d, %Y",)


class Rule(BaseModel):
    """One way of recognising a document and pulling its date."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    vendor_match_regex: str = Field(..., alias="vendorMatchRegex")
    additional_match_regex: str = Field(..., alias="additionalMatchRegex")
    date_extraction_regex: str = Field(..., alias="dateExtractionRegex")
    vendor_label: str | None = Field(default=None, alias="vendorLabel")
    date_formats: tuple[str, ...] = Field(default=DEFAULT_DATE_FORMATS, alias="dateFormats")
    name: str | None = None

    @field_validator("vendor_match_regex", "additional_match_regex", "date_extraction_regex")
    @classmethod
    def _ensure_valid_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regex {value!r}: {exc}") from exc
        return value

    @field_validator("vendor_label")
    @classmethod
    def _strip_label(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("date_formats")
    @classmethod
    def _ensure_formats_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("dateFormats must contain at least one format")
        return value

    @property
    def label(self) -> str:
        """Name used in log lines."""

        return self.name or self.vendor_match_regex


class RuleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    rules: tuple[Rule, ...]
