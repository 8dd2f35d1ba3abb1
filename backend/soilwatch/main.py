"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .context import build_context
from .errors import register_exception_handlers
from .routers import usuarios_router, sensores_router, reportes_router, tokens_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    ctx = app.state.ctx
    logger.info("Starting Soilwatch")
    
    await ctx.db.init()
    
    yield
    
    await ctx.push_sender.close()
    await ctx.db.close()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    
    app = FastAPI(
        title="Soilwatch",
        description="Soil and plant monitoring - users, sensors and readings",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.ctx = build_context(settings)
    
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app, expose_detail=settings.expose_error_detail)
    
    app.include_router(usuarios_router)
    app.include_router(sensores_router)
    app.include_router(reportes_router)
    app.include_router(tokens_router)
    
    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "database": app.state.ctx.db.kind,
        }
    
    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(app, host="0.0.0.0", port=default_settings.web_port)
