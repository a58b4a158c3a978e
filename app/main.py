from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.api.v1.exception_handlers import register_exception_handlers
from app.core.config import settings
from app.db.session import db_manager
from app.middlewares.logging_middleware import LoggingMiddleware
from app.utils.logger import configure_logging, get_logger


# Configure logging to prevent duplicates
configure_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(_: FastAPI):
    db_manager.init_db()
    yield


app = FastAPI(title="Location Service", debug=settings.debug, lifespan=lifespan)

allowed_origins = settings.allowed_hosts_list
if not allowed_origins:
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
    logger.info("Using fallback CORS origins (no valid origins from settings)")

logger.info(f"CORS allowed origins: {allowed_origins}")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

register_exception_handlers(app)

# Prometheus instrumentation
Instrumentator().instrument(app).expose(app)

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "healthy", "message": "Location service is running"}


@app.get("/")
async def root():
    return {"message": "Location Service"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
