from pydantic import BaseModel, Field


class FilenameRequest(BaseModel):
    text: str = Field(..., description="OCR text of the scanned document")


class FilenameResponse(BaseModel):
    filename: str = Field(..., description="Suggested filename, '<YYYYMMDD> - <vendor>.pdf'")
    date: str = Field(..., pattern=r"^\d{8}$", description="Canonical YYYYMMDD date")
    vendor: str
    rule_index: int = Field(..., ge=0, description="Position of the winning rule in the rule set")
