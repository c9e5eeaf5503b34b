import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.routers import health, avatar, media_lists
from app.core.config import get_settings
from app.core.logging_config import configure_logging
from app import db
from app import models  # ensure models are imported
from app.seed import seed_avatars

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    session_factory = db.init_db()
    # İlk deploy için otomatik tablo oluşturma (idempotent)
    if settings.AUTO_CREATE_TABLES:
        models.Base.metadata.create_all(bind=db.engine)
    if settings.SEED_AVATARS:
        seed_avatars(session_factory)
    yield
    db.dispose_db()

app = FastAPI(
    title="Media Lists API",
    description="Watchlist, favorites, watched lists and avatars for users",
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response

# Fixed paths first so /health and /avatar/all are not read as /{user_id}/{kind}
app.include_router(health.router)
app.include_router(avatar.router)
app.include_router(media_lists.router)
