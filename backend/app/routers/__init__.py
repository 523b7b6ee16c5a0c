"""API routers for the TI Concursos application."""

from .answer_attempts import router as answer_attempts_router
from .answers import router as answers_router
from .catalog import bancas_router, tags_router, technologies_router
from .courses import router as courses_router
from .enrollments import router as enrollments_router
from .favorite_questions import router as favorite_questions_router
from .lessons import router as lessons_router
from .modules import router as modules_router
from .notifications import router as notifications_router
from .progress import router as progress_router
from .questions import router as questions_router
from .reviews import router as reviews_router
from .topic_performance import router as topic_performance_router
from .topics import router as topics_router
from .users import router as users_router

__all__ = [
    "answer_attempts_router",
    "answers_router",
    "bancas_router",
    "courses_router",
    "enrollments_router",
    "favorite_questions_router",
    "lessons_router",
    "modules_router",
    "notifications_router",
    "progress_router",
    "questions_router",
    "reviews_router",
    "tags_router",
    "technologies_router",
    "topic_performance_router",
    "topics_router",
    "users_router",
]
