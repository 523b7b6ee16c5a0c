"""Pydantic models for the TI Concursos API."""

from .answer import (
    Answer,
    AnswerAttempt,
    AnswerAttemptCreate,
    AnswerAttemptUpdate,
    AnswerCreate,
    AnswerUpdate,
)
from .common import ErrorResponse, FieldError, Message
from .course import (
    Course,
    CourseCreate,
    CourseDetail,
    CourseUpdate,
    Lesson,
    LessonCreate,
    LessonType,
    LessonUpdate,
    Module,
    ModuleCreate,
    ModuleDetail,
    ModuleUpdate,
)
from .enrollment import Enrollment, EnrollmentCreate, EnrollmentStatus, EnrollmentUpdate
from .favorite import FavoriteQuestion, FavoriteQuestionCreate, FavoriteQuestionUpdate
from .notification import Notification, NotificationCreate, NotificationUpdate
from .progress import (
    Progress,
    ProgressCreate,
    ProgressUpdate,
    TopicPerformance,
    TopicPerformanceCreate,
    TopicPerformanceUpdate,
)
from .question import Difficulty, Option, OptionCreate, Question, QuestionCreate, QuestionType, QuestionUpdate
from .review import Review, ReviewCreate, ReviewUpdate
from .taxonomy import (
    Banca,
    BancaCreate,
    BancaUpdate,
    Subtopic,
    SubtopicCreate,
    Tag,
    TagCreate,
    TagUpdate,
    Technology,
    TechnologyCreate,
    TechnologyUpdate,
    Topic,
    TopicCreate,
    TopicUpdate,
)
from .user import CurrentUser, LoginRequest, Token, User, UserCreate, UserRole, UserUpdate

__all__ = [
    "Answer",
    "AnswerAttempt",
    "AnswerAttemptCreate",
    "AnswerAttemptUpdate",
    "AnswerCreate",
    "AnswerUpdate",
    "ErrorResponse",
    "FieldError",
    "Message",
    "Course",
    "CourseCreate",
    "CourseDetail",
    "CourseUpdate",
    "Lesson",
    "LessonCreate",
    "LessonType",
    "LessonUpdate",
    "Module",
    "ModuleCreate",
    "ModuleDetail",
    "ModuleUpdate",
    "Enrollment",
    "EnrollmentCreate",
    "EnrollmentStatus",
    "EnrollmentUpdate",
    "FavoriteQuestion",
    "FavoriteQuestionCreate",
    "FavoriteQuestionUpdate",
    "Notification",
    "NotificationCreate",
    "NotificationUpdate",
    "Progress",
    "ProgressCreate",
    "ProgressUpdate",
    "TopicPerformance",
    "TopicPerformanceCreate",
    "TopicPerformanceUpdate",
    "Difficulty",
    "Option",
    "OptionCreate",
    "Question",
    "QuestionCreate",
    "QuestionType",
    "QuestionUpdate",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
    "Banca",
    "BancaCreate",
    "BancaUpdate",
    "Subtopic",
    "SubtopicCreate",
    "Tag",
    "TagCreate",
    "TagUpdate",
    "Technology",
    "TechnologyCreate",
    "TechnologyUpdate",
    "Topic",
    "TopicCreate",
    "TopicUpdate",
    "CurrentUser",
    "LoginRequest",
    "Token",
    "User",
    "UserCreate",
    "UserRole",
    "UserUpdate",
]
