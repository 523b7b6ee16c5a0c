"""Business logic services."""

from .answers import AnswerAttemptService, AnswerService
from .base import ConflictError, InvalidDataError, RecordNotFoundError, ResourceService
from .courses import CourseService, LessonService, ModuleService
from .enrollments import EnrollmentService
from .favorites import FavoriteQuestionService
from .notifications import NotificationService
from .progress import ProgressService, TopicPerformanceService
from .questions import QuestionService
from .reviews import ReviewService
from .taxonomy import BancaService, TagService, TechnologyService, TopicService
from .users import UserService

__all__ = [
    "AnswerAttemptService",
    "AnswerService",
    "BancaService",
    "ConflictError",
    "CourseService",
    "EnrollmentService",
    "FavoriteQuestionService",
    "InvalidDataError",
    "LessonService",
    "ModuleService",
    "NotificationService",
    "ProgressService",
    "QuestionService",
    "RecordNotFoundError",
    "ResourceService",
    "ReviewService",
    "TagService",
    "TechnologyService",
    "TopicPerformanceService",
    "TopicService",
    "UserService",
]
