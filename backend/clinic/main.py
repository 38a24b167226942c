"""
Clinic Records API - Main FastAPI Application

REST service for the administrative records of a small clinic: patients,
doctors, appointments, medical tests and medical history entries.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clinic import __version__
from clinic.config import Settings, get_settings
from clinic.database import Database, init_db, get_db
from clinic.exceptions import StartupError, register_exception_handlers
from clinic.routers import (
    patients_router,
    doctors_router,
    appointments_router,
    medical_history_router,
)
from clinic.seed import seed_database

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around the given settings (cached settings by default)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown events."""
        # Startup: connect -> create schema -> seed, all before serving
        logger.info(f"🚀 Starting {settings.project_name}...")
        database = Database(settings.database_url, echo=settings.debug)
        try:
            database.ping()
            logger.info("✅ Database connection established")
            init_db(database)
            if settings.seed_on_startup:
                with database.session() as db:
                    seed_database(db)
        except SQLAlchemyError as e:
            logger.critical(f"❌ Startup failed: {e}")
            database.dispose()
            raise StartupError(f"Startup failed: {e}") from e

        app.state.database = database
        logger.info("✅ Application started successfully!")

        yield

        # Shutdown
        logger.info("🛑 Shutting down application...")
        database.dispose()
        logger.info("👋 Application shutdown complete")

    app = FastAPI(
        title=settings.project_name,
        description="Create, read, update and delete clinic records: "
                    "patients, doctors, appointments, medical tests and medical history.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        """Allow any origin; pre-flight requests are answered without routing."""
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception(f"Unhandled error on {request.method} {request.url.path}: {e}")
                response = JSONResponse(status_code=500, content={"error": "Internal Server Error"})
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(patients_router)
    app.include_router(doctors_router)
    app.include_router(appointments_router)
    app.include_router(medical_history_router)

    @app.get("/", tags=["Health Check"])
    async def root():
        """Root endpoint - API banner."""
        return {
            "status": "healthy",
            "application": settings.project_name,
            "version": __version__,
            "documentation": "/docs",
        }

    @app.get("/health", tags=["Health Check"])
    def health_check(db: Session = Depends(get_db)):
        """Health check that also proves the database answers."""
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}

    return app


app = create_app()


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "clinic.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
