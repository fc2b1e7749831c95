import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Base, engine, settings
from app.core.exceptions import register_exception_handlers
from app.api.routers import diary, tasks, streaks, prompts, quotes, insights
from app.services.streak import streak_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# =====================================================================
# CREATE APP
# =====================================================================

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    description="Digital Diary API: tasks, journaling, streaks and insights",
    version="1.0.0",
)

# =====================================================================
# CORS MIDDLEWARE
# =====================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

logger.info("CORS allowed origins: %s", settings.CORS_ORIGINS)

register_exception_handlers(app)

# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

Base.metadata.create_all(bind=engine)

# =====================================================================
# HEALTH CHECK (before routers)
# =====================================================================


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "local_utc_offset_minutes": settings.LOCAL_UTC_OFFSET_MINUTES,
        "streak_update_failures": streak_service.failed_updates,
    }


# =====================================================================
# ROUTES
# =====================================================================

app.include_router(diary.router)
app.include_router(tasks.router)
app.include_router(tasks.category_router)
app.include_router(streaks.router)
app.include_router(prompts.router)
app.include_router(quotes.router)
app.include_router(insights.router)

# =====================================================================
# ROOT ENDPOINT
# =====================================================================


@app.get("/")
def root():
    """API root endpoint."""
    return {
        "message": "Welcome to Digital Diary API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "diary": "/diary",
            "tasks": "/tasks",
            "categories": "/categories",
            "streaks": "/streaks",
            "prompts": "/prompts",
            "quotes": "/quotes",
            "insights": "/insights",
        },
    }
