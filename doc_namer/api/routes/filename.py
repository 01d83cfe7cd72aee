import logging

from fastapi import APIRouter, HTTPException, status

from doc_namer.api.deps import RulesDep
from doc_namer.core.exceptions import NoMatchError
from doc_namer.schemas.filename import FilenameRequest, FilenameResponse
from doc_namer.services.rules.rule_matcher import match_rules

router = APIRouter(prefix="/filename", tags=["filename"])

logger = logging.getLogger(__name__)


@router.post(
    "/suggest",
    summary="Suggest a filename for OCR text",
    response_model=FilenameResponse,
)
def suggest(request: FilenameRequest, rules: RulesDep) -> FilenameResponse:
    """Run the rule set over the submitted text and return the first match."""

    try:
        match = match_rules(request.text, rules)
    except NoMatchError as exc:
        logger.warning("No rule matched: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(exc), "errors": ["no_matching_rule"]},
        ) from exc

    return FilenameResponse(
        filename=match.filename,
        date=match.date,
        vendor=match.vendor,
        rule_index=match.rule_index,
    )
