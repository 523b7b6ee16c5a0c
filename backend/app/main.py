"""TI Concursos - FastAPI Application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import auth
from app.api.errors import register_exception_handlers
from app.config import settings
from app.db import close_db, init_db
from app.db.database import async_session
from app.routers import (
    answer_attempts_router,
    answers_router,
    bancas_router,
    courses_router,
    enrollments_router,
    favorite_questions_router,
    lessons_router,
    modules_router,
    notifications_router,
    progress_router,
    questions_router,
    reviews_router,
    tags_router,
    technologies_router,
    topic_performance_router,
    topics_router,
    users_router,
)
from app.services.users import UserService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


async def seed_admin():
    """Create the bootstrap admin account when configured."""
    if not (settings.seed_admin_email and settings.seed_admin_password):
        logger.info("No bootstrap admin configured. Skipping.")
        return

    async with async_session() as session:
        created = await UserService(session).ensure_admin(
            settings.seed_admin_email, settings.seed_admin_password
        )
        await session.commit()

    if created:
        logger.info(f"Created bootstrap admin {settings.seed_admin_email}")
    else:
        logger.info("Bootstrap admin already exists.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Initializing database...")
    await init_db()
    logger.info("Database initialized.")

    await seed_admin()

    logger.info("Startup complete.")
    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Question bank and course platform for IT public-exam candidates",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router)
app.include_router(users_router)
app.include_router(questions_router)
app.include_router(answers_router)
app.include_router(answer_attempts_router)
app.include_router(courses_router)
app.include_router(modules_router)
app.include_router(lessons_router)
app.include_router(enrollments_router)
app.include_router(favorite_questions_router)
app.include_router(notifications_router)
app.include_router(progress_router)
app.include_router(reviews_router)
app.include_router(topic_performance_router)
app.include_router(topics_router)
app.include_router(tags_router)
app.include_router(technologies_router)
app.include_router(bancas_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
