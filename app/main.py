import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import router as api_router
from app.core.config import settings
from app.core.db import SessionLocal, engine
from app.core.errors import ClientError, client_error_handler
from app.core.telemetry import setup_telemetry
from app.services.bootstrap import bootstrap

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.bootstrap_on_startup:
        await bootstrap(engine, SessionLocal)
    yield
    await engine.dispose()


app = FastAPI(title="VetNest API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(ClientError, client_error_handler)

setup_telemetry(app)
app.include_router(api_router)
