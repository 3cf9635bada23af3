# /app/main.py

# --- Core FastAPI Imports ---
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core import config
from .core.exceptions import register_exception_handlers
from .core.logging_setup import setup_logging
from .db.database import init_db, dispose_engine
from .routers import generation_router, history_router

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    if config.AUTO_CREATE_TABLES:
        init_db()
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; code generation requests will fail with 401.")
    logger.info("Code generator backend ready, public URL %s", config.PUBLIC_API_URL)
    yield
    # This code runs ONCE when the application shuts down.
    dispose_engine()

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Code Generator Backend API",
    description="Turns natural-language prompts into source code and keeps a browsable history.",
    version="1.0.0",
    servers=[{"url": config.PUBLIC_API_URL}],
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# --- API Router Inclusion ---
app.include_router(generation_router.router, prefix="/api/generate", tags=["Generation"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])

# --- Health Check Endpoint ---
@app.get("/health", tags=["Health Check"])
async def health():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)
