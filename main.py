import logging
from fastapi import FastAPI
from routes.link_preview import router as link_preview_router
from routes.content_route import router as content_router
from routes.debug import router as debug_router
from config.preview_config import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="StockFlow Link Preview")
app.include_router(link_preview_router, prefix="/api", tags=["link-preview"])
app.include_router(content_router, prefix="/api", tags=["content"])
app.include_router(debug_router, prefix="/debug", tags=["debug"])


@app.on_event("startup")
async def startup_event():
    logger.info("Starting application...")
    logger.info(f"Configuration: fetch backend '{settings.fetch_backend}', "
                f"extractor '{settings.extractor_backend}', "
                f"timeout {settings.fetch_timeout}s")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": "StockFlow Link Preview API",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "fetch_backend": settings.fetch_backend,
        "extractor_backend": settings.extractor_backend,
        "fetch_timeout": settings.fetch_timeout
    }
