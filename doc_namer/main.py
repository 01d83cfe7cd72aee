import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from doc_namer.api.routes.filename import router as filename_router
from doc_namer.api.routes.health import router as health_router
from doc_namer.core.config import settings
from doc_namer.core.logging import setup_logging
from doc_namer.services.rules.rule_loader import load_rules
from doc_namer.state import global_state

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting doc-namer service...")

    logger.info("Loading rules from %s", settings.rules_path)
    global_state.rules = load_rules(settings.rules_path)
    logger.info("Loaded %d rules", len(global_state.rules))

    yield
    global_state.rules = None
    logger.info("Shutting down service...")


app = FastAPI(title="Doc Namer Service", lifespan=lifespan)

app.include_router(health_router, prefix="/api")
app.include_router(filename_router, prefix="/api")
