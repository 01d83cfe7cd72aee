from typing import Annotated

from fastapi import Depends, HTTPException

from doc_namer.schemas.rules import Rule
from doc_namer.state import global_state


async def get_rules() -> tuple[Rule, ...]:
    if global_state.rules is None:
        raise HTTPException(status_code=503, detail="Rule set not loaded")
    return global_state.rules


RulesDep = Annotated[tuple[Rule, ...], Depends(get_rules)]
