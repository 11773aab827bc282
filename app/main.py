# ============================================================================
# FILE: app/main.py
# ============================================================================
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.errors import register_exception_handlers
from app.api.v1.router import api_router
from app.core.logging import setup_logging
from app.config import settings
from app.db.base import Base, import_models
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

import_models()

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Music catalog with user playlists",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
async def startup_event():
    """Create database tables on startup"""
    logger.info(f"Starting {settings.APP_NAME}")
    from app.db.session import engine
    Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {settings.APP_NAME}")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
