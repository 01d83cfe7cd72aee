"""Usage: derive standardized document filenames from OCR text."""

__version__ = "0.1.0"
