"""Usage: error types raised while loading rules and naming documents."""


class DocNamerError(Exception):
    """Base class for all doc-namer failures."""


class ConfigLoadError(DocNamerError):
    """Rule configuration is missing, unreadable or malformed."""


class InputReadError(DocNamerError):
    """OCR text could not be read."""


class NoMatchError(DocNamerError):
    """No rule matched the text and produced a date."""

    def __init__(self, message: str = "no matching rule found", *, rules_tried: int = 0) -> None:
        super().__init__(message)
        self.rules_tried = rules_tried


class DateExtractionError(DocNamerError):
    """A single rule could not extract or parse a date. Recovered by the matcher."""
