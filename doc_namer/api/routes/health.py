from fastapi import APIRouter

from doc_namer.schemas.common import HealthResponse
from doc_namer.state import global_state

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    rules = global_state.rules or ()
    return HealthResponse(status="ok", rules_loaded=len(rules))
