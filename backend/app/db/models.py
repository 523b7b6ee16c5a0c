"""SQLAlchemy database models."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _fk(target: str, nullable: bool = False, ondelete: str = "CASCADE"):
    return mapped_column(
        String(36), ForeignKey(target, ondelete=ondelete), nullable=nullable, index=True
    )


class UserDB(Base):
    """User database model."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="STUDENT")
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class TopicDB(Base):
    """Question topic (e.g. "Banco de Dados")."""

    __tablename__ = "topics"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    subtopics: Mapped[list["SubtopicDB"]] = relationship(
        back_populates="topic",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SubtopicDB.name",
    )


class SubtopicDB(Base):
    """Subtopic within a topic."""

    __tablename__ = "subtopics"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    topic_id: Mapped[str] = _fk("topics.id")

    topic: Mapped["TopicDB"] = relationship(back_populates="subtopics")

    __table_args__ = (UniqueConstraint("topic_id", "name"),)


class BancaDB(Base):
    """Examining board that authored a question."""

    __tablename__ = "bancas"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)


class TechnologyDB(Base):
    """Technology a question relates to."""

    __tablename__ = "technologies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)


class TagDB(Base):
    """Free-form question tag."""

    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class QuestionDB(Base):
    """Question database model."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    question_type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    topic_id: Mapped[str] = _fk("topics.id")
    subtopic_id: Mapped[str | None] = _fk("subtopics.id", nullable=True, ondelete="SET NULL")
    banca_id: Mapped[str | None] = _fk("bancas.id", nullable=True, ondelete="SET NULL")
    author_id: Mapped[str | None] = _fk("users.id", nullable=True, ondelete="SET NULL")
    source_concurso: Mapped[str | None] = mapped_column(String(255), nullable=True)
    source_cargo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    source_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    source_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    options: Mapped[list["OptionDB"]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OptionDB.order",
    )
    tags: Mapped[list["TagDB"]] = relationship(secondary="question_tags")
    technologies: Mapped[list["TechnologyDB"]] = relationship(secondary="question_technologies")


class OptionDB(Base):
    """Answer option of a multiple-choice question."""

    __tablename__ = "options"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    question_id: Mapped[str] = _fk("questions.id")
    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False)
    order: Mapped[int] = mapped_column(Integer, default=0)

    question: Mapped["QuestionDB"] = relationship(back_populates="options")


class QuestionTagDB(Base):
    """Question <-> tag link."""

    __tablename__ = "question_tags"

    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True
    )


class QuestionTechnologyDB(Base):
    """Question <-> technology link."""

    __tablename__ = "question_technologies"

    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    technology_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True
    )


class AnswerDB(Base):
    """A user's answer to a question."""

    __tablename__ = "answers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    question_id: Mapped[str] = _fk("questions.id")
    selected_option: Mapped[str | None] = mapped_column(String(255), nullable=True)
    text_answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_correct: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    time_spent_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    answered_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    attempts: Mapped[list["AnswerAttemptDB"]] = relationship(
        back_populates="answer", cascade="all, delete-orphan", passive_deletes=True
    )


class AnswerAttemptDB(Base):
    """A single (re)attempt at an answer."""

    __tablename__ = "answer_attempts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    answer_id: Mapped[str] = _fk("answers.id")
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    time_spent: Mapped[float | None] = mapped_column(Float, nullable=True)
    attempt_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now, index=True)

    answer: Mapped["AnswerDB"] = relationship(back_populates="attempts")


class CourseDB(Base):
    """Course database model."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    instructor_id: Mapped[str] = _fk("users.id")
    thumbnail: Mapped[str | None] = mapped_column(String(500), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    modules: Mapped[list["ModuleDB"]] = relationship(
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ModuleDB.order",
    )


class ModuleDB(Base):
    """Course module database model."""

    __tablename__ = "modules"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    course_id: Mapped[str] = _fk("courses.id")
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    course: Mapped["CourseDB"] = relationship(back_populates="modules")
    lessons: Mapped[list["LessonDB"]] = relationship(
        back_populates="module",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LessonDB.order",
    )

    # One module per position within a course
    __table_args__ = (UniqueConstraint("course_id", "order"),)


class LessonDB(Base):
    """Lesson database model."""

    __tablename__ = "lessons"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    module_id: Mapped[str] = _fk("modules.id")
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    lesson_type: Mapped[str] = mapped_column(String(20), nullable=False)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    module: Mapped["ModuleDB"] = relationship(back_populates="lessons")


class EnrollmentDB(Base):
    """Enrollment of a user in a course."""

    __tablename__ = "enrollments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    course_id: Mapped[str] = _fk("courses.id")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")
    enrolled_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (UniqueConstraint("user_id", "course_id"),)


class FavoriteQuestionDB(Base):
    """Question bookmarked by a user."""

    __tablename__ = "favorite_questions"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    marked_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class NotificationDB(Base):
    """Notification addressed to a user."""

    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class ProgressDB(Base):
    """Lesson progress of a user."""

    __tablename__ = "user_progress"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    lesson_id: Mapped[str] = _fk("lessons.id")
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (UniqueConstraint("user_id", "lesson_id"),)


class ReviewDB(Base):
    """Course review written by a user."""

    __tablename__ = "course_reviews"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    course_id: Mapped[str] = _fk("courses.id")
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class TopicPerformanceDB(Base):
    """Per-topic answer statistics of a user."""

    __tablename__ = "user_topic_performance"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = _fk("users.id")
    topic_id: Mapped[str] = _fk("topics.id")
    correct_answers: Mapped[int] = mapped_column(Integer, default=0)
    total_questions: Mapped[int] = mapped_column(Integer, default=0)
    accuracy: Mapped[float] = mapped_column(Float, default=0.0)
    last_attempt: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    __table_args__ = (UniqueConstraint("user_id", "topic_id"),)
