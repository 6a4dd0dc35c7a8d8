import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import init_db
from .errors import InsufficientDataError
from .globals import PACKAGE_DIR, vocab_manager
from .log_handler import SQLiteHandler
from .router import router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("kotoba")
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.abspath(os.path.join(settings.LOG_DIR, settings.LOG_FILE))
    has_file_handler = any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == log_path
        for h in logger.handlers
    )
    if not has_file_handler:
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    if settings.LOG_DB_ENABLED and not any(
        isinstance(h, SQLiteHandler) for h in logger.handlers
    ):
        init_db()
        logger.addHandler(SQLiteHandler())

    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    vocab_manager.load_all()
    yield


async def insufficient_data_handler(request: Request, exc: InsufficientDataError):
    logging.getLogger("kotoba").error(f"Cannot build a question: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=500)


# --- App Factory ---
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )

    app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")
    app.add_exception_handler(InsufficientDataError, insufficient_data_handler)

    app.include_router(router)

    return app
