"""Database layer for the TI Concursos backend."""

from .database import async_session, close_db, engine, get_db, init_db
from .models import (
    AnswerAttemptDB,
    AnswerDB,
    BancaDB,
    Base,
    CourseDB,
    EnrollmentDB,
    FavoriteQuestionDB,
    LessonDB,
    ModuleDB,
    NotificationDB,
    OptionDB,
    ProgressDB,
    QuestionDB,
    ReviewDB,
    SubtopicDB,
    TagDB,
    TechnologyDB,
    TopicDB,
    TopicPerformanceDB,
    UserDB,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session",
    "Base",
    "UserDB",
    "TopicDB",
    "SubtopicDB",
    "BancaDB",
    "TechnologyDB",
    "TagDB",
    "QuestionDB",
    "OptionDB",
    "AnswerDB",
    "AnswerAttemptDB",
    "CourseDB",
    "ModuleDB",
    "LessonDB",
    "EnrollmentDB",
    "FavoriteQuestionDB",
    "NotificationDB",
    "ProgressDB",
    "ReviewDB",
    "TopicPerformanceDB",
]
