"""FastAPI application entry point for the user API."""

import logging

from src.userapi.config import get_settings

# Configure logging before importing modules
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from fastapi import FastAPI  # noqa: E402

from src.userapi.api.exception_handlers import register_exception_handlers  # noqa: E402
from src.userapi.api.routers import api_router  # noqa: E402

app = FastAPI(
    title="User API",
    description="User management REST backend with link-annotated pagination",
    version="0.1.0",
)

register_exception_handlers(app)

# Include API routers
app.include_router(api_router, prefix=get_settings().api_prefix)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
