from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rules_loaded: int = 0
