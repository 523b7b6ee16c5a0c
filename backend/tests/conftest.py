"""Shared fixtures: a fresh SQLite database per test and users for every role."""

import asyncio
from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from app.db import get_db
from app.db.database import build_engine, init_db
from app.db.models import UserDB
from app.main import app
from app.utils.auth import create_access_token, get_password_hash

PASSWORD = "password123"
_password_hash = None


def _hashed_password() -> str:
    # bcrypt is slow; hash the shared test password once
    global _password_hash
    if _password_hash is None:
        _password_hash = get_password_hash(PASSWORD)
    return _password_hash


def auth_headers(user_id: str, role: str, email: str | None = None) -> dict:
    token = create_access_token({"sub": user_id, "role": role, "email": email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def session_factory(tmp_path):
    """Session factory bound to an empty database file."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_db(bind=engine))
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the per-test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    """Insert a user directly and return its id, e-mail and auth headers."""

    def _make(role: str = "STUDENT", name: str = "Test User", email: str | None = None):
        email = email or f"{role.lower()}-{uuid4().hex[:8]}@example.com"

        async def _insert() -> str:
            async with session_factory() as session:
                user = UserDB(name=name, email=email, role=role, hashed_password=_hashed_password())
                session.add(user)
                await session.commit()
                return user.id

        user_id = asyncio.run(_insert())
        return SimpleNamespace(
            id=user_id,
            email=email,
            role=role,
            headers=auth_headers(user_id, role, email),
        )

    return _make


@pytest.fixture
def admin(make_user):
    return make_user("ADMIN", name="Admin")


@pytest.fixture
def teacher(make_user):
    return make_user("TEACHER", name="Teacher")


@pytest.fixture
def student(make_user):
    return make_user("STUDENT", name="Student A")


@pytest.fixture
def other_student(make_user):
    return make_user("STUDENT", name="Student B")


@pytest.fixture
def topic(client, admin):
    response = client.post("/topics", json={"name": "Banco de Dados"}, headers=admin.headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def question_payload(topic):
    return {
        "text": "Qual comando SQL remove todas as linhas de uma tabela?",
        "difficulty": "MEDIO",
        "questionType": "MULTIPLA_ESCOLHA",
        "topicId": topic["id"],
        "options": [
            {"text": "TRUNCATE", "isCorrect": True, "order": 0},
            {"text": "DROP", "isCorrect": False, "order": 1},
        ],
    }


@pytest.fixture
def question(client, teacher, question_payload):
    response = client.post("/questions", json=question_payload, headers=teacher.headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def course(client, teacher):
    response = client.post(
        "/courses",
        json={
            "title": "SQL para Concursos",
            "description": "Consultas, junções e normalização.",
            "instructorId": teacher.id,
        },
        headers=teacher.headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def module(client, teacher, course):
    response = client.post(
        "/modules",
        json={"title": "Fundamentos", "courseId": course["id"], "order": 1},
        headers=teacher.headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def lesson(client, teacher, module):
    response = client.post(
        "/lessons",
        json={
            "title": "SELECT básico",
            "content": "SELECT coluna FROM tabela;",
            "lessonType": "TEXT",
            "moduleId": module["id"],
            "order": 1,
        },
        headers=teacher.headers,
    )
    assert response.status_code == 201
    return response.json()
