import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config import settings
from app.db import init_db

# Ensure all models are registered with Base.metadata before create_all
from app import models  # noqa: F401

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; email generation requests will fail")

    try:
        await init_db()
    except Exception:
        logger.exception("Database initialization failed")
        raise  # Fail startup so the platform shows the error

    app.state.http_client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds)
    yield
    await app.state.http_client.aclose()
    from app.db.session import get_engine
    engine = get_engine()
    await engine.dispose()


app = FastAPI(
    title="LazyMails API",
    description="Generate personalized cold emails from LinkedIn profile data with Gemini.",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [err.get("msg", "Invalid request") for err in exc.errors()]
    return JSONResponse(status_code=400, content={"detail": messages})


@app.get("/health")
async def health():
    return {"status": "ok"}
