"""Tests for notifications and lesson progress."""

from uuid import uuid4

import pytest


@pytest.fixture
def notification(client, admin, student):
    response = client.post(
        "/notifications",
        json={"userId": student.id, "title": "Bem-vindo", "message": "Sua matrícula foi confirmada."},
        headers=admin.headers,
    )
    assert response.status_code == 201
    return response.json()


class TestNotifications:
    def test_created_unread(self, notification):
        assert notification["isRead"] is False

    def test_only_admin_creates(self, client, student):
        response = client.post(
            "/notifications",
            json={"userId": student.id, "title": "X", "message": "Y"},
            headers=student.headers,
        )
        assert response.status_code == 403

    def test_recipient_marks_as_read(self, client, student, notification):
        response = client.patch(
            f"/notifications/{notification['id']}", json={"isRead": True}, headers=student.headers
        )
        assert response.status_code == 200
        assert response.json()["isRead"] is True

        unread = client.get("/notifications?isRead=false", headers=student.headers).json()
        assert unread == []

    def test_recipient_cannot_edit_text(self, client, student, notification):
        response = client.patch(
            f"/notifications/{notification['id']}", json={"title": "Outro"}, headers=student.headers
        )
        assert response.status_code == 403

    def test_admin_edits_text(self, client, admin, notification):
        response = client.patch(
            f"/notifications/{notification['id']}", json={"title": "Outro"}, headers=admin.headers
        )
        assert response.json()["title"] == "Outro"

    def test_others_cannot_see(self, client, other_student, notification):
        assert client.get("/notifications", headers=other_student.headers).json() == []
        response = client.get(f"/notifications/{notification['id']}", headers=other_student.headers)
        assert response.status_code == 403

    def test_only_admin_deletes(self, client, admin, student, notification):
        url = f"/notifications/{notification['id']}"
        assert client.delete(url, headers=student.headers).status_code == 403
        assert client.delete(url, headers=admin.headers).status_code == 200
        assert client.delete(url, headers=admin.headers).status_code == 404


class TestProgress:
    def test_completing_stamps_date(self, client, student, lesson):
        response = client.post(
            "/progress",
            json={"userId": student.id, "lessonId": lesson["id"], "isCompleted": True},
            headers=student.headers,
        )
        assert response.status_code == 201
        assert response.json()["completedAt"] is not None

    def test_reopening_clears_date(self, client, student, lesson):
        progress = client.post(
            "/progress",
            json={"userId": student.id, "lessonId": lesson["id"], "isCompleted": True},
            headers=student.headers,
        ).json()
        response = client.patch(
            f"/progress/{progress['id']}", json={"isCompleted": False}, headers=student.headers
        )
        assert response.status_code == 200
        assert response.json()["completedAt"] is None

    def test_unknown_lesson(self, client, student):
        response = client.post(
            "/progress", json={"userId": student.id, "lessonId": str(uuid4())}, headers=student.headers
        )
        assert response.status_code == 404

    def test_unknown_user(self, client, admin, lesson):
        response = client.post(
            "/progress", json={"userId": str(uuid4()), "lessonId": lesson["id"]}, headers=admin.headers
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Usuário não encontrado."

    def test_cannot_record_for_someone_else(self, client, student, other_student, lesson):
        response = client.post(
            "/progress",
            json={"userId": other_student.id, "lessonId": lesson["id"]},
            headers=student.headers,
        )
        assert response.status_code == 403

    def test_one_record_per_lesson(self, client, student, lesson):
        payload = {"userId": student.id, "lessonId": lesson["id"]}
        client.post("/progress", json=payload, headers=student.headers)
        assert client.post("/progress", json=payload, headers=student.headers).status_code == 409

    def test_list_scoped_to_caller(self, client, admin, student, other_student, lesson):
        client.post("/progress", json={"userId": student.id, "lessonId": lesson["id"]}, headers=student.headers)
        assert len(client.get("/progress", headers=student.headers).json()) == 1
        assert client.get("/progress", headers=other_student.headers).json() == []
        assert len(client.get(f"/progress?lessonId={lesson['id']}", headers=admin.headers).json()) == 1

    def test_only_admin_deletes(self, client, admin, student, lesson):
        progress = client.post(
            "/progress", json={"userId": student.id, "lessonId": lesson["id"]}, headers=student.headers
        ).json()
        url = f"/progress/{progress['id']}"
        assert client.delete(url, headers=student.headers).status_code == 403
        assert client.delete(url, headers=admin.headers).status_code == 200
