from dotenv import load_dotenv
import logging
import os

load_dotenv()
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from writecheck.api.routes import router as api_router
from writecheck.core.config import settings
from writecheck.db.kv_store import init_kv_store
from writecheck.db.session import SessionLocal

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def check_startup_config():
    """Warnt bei fehlendem Key; /analysis funktioniert auch ohne."""
    if settings.llm_provider != "fake" and not os.getenv("OPENAI_API_KEY"):
        logger.warning(
            "OPENAI_API_KEY is not set. "
            "Set it in .env file or as environment variable. "
            "Required for AI feedback (/api/analyse, /api/quick-check)."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_startup_config()
    db = SessionLocal()
    try:
        init_kv_store(db)
    finally:
        db.close()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


# Request-Logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} API running"}
