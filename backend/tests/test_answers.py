"""Tests for answers and answer attempts."""

from uuid import uuid4

import pytest


@pytest.fixture
def answer(client, student, question):
    response = client.post(
        "/answers",
        json={
            "userId": student.id,
            "questionId": question["id"],
            "selectedOption": "TRUNCATE",
            "isCorrect": True,
            "timeSpentSeconds": 40,
        },
        headers=student.headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def attempt(client, student, answer):
    response = client.post(
        "/answer-attempts",
        json={"answerId": answer["id"], "isCorrect": False, "timeSpent": 12.5},
        headers=student.headers,
    )
    assert response.status_code == 201
    return response.json()


class TestAnswers:
    def test_create_for_self(self, answer, student):
        assert answer["userId"] == student.id
        assert answer["isCorrect"] is True

    def test_cannot_answer_for_someone_else(self, client, student, other_student, question):
        response = client.post(
            "/answers",
            json={"userId": other_student.id, "questionId": question["id"]},
            headers=student.headers,
        )
        assert response.status_code == 403

    def test_unknown_question(self, client, student):
        response = client.post(
            "/answers", json={"userId": student.id, "questionId": str(uuid4())}, headers=student.headers
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Questão não encontrada."

    def test_negative_time_rejected(self, client, student, question):
        response = client.post(
            "/answers",
            json={"userId": student.id, "questionId": question["id"], "timeSpentSeconds": -1},
            headers=student.headers,
        )
        assert response.status_code == 400

    def test_list_is_scoped_to_caller(self, client, student, other_student, answer):
        assert len(client.get("/answers", headers=student.headers).json()) == 1
        assert client.get("/answers", headers=other_student.headers).json() == []
        response = client.get(f"/answers?userId={student.id}", headers=other_student.headers)
        assert response.status_code == 403

    def test_other_user_cannot_read(self, client, other_student, answer):
        response = client.get(f"/answers/{answer['id']}", headers=other_student.headers)
        assert response.status_code == 403

    def test_owner_updates(self, client, student, answer):
        response = client.patch(
            f"/answers/{answer['id']}", json={"isCorrect": False}, headers=student.headers
        )
        assert response.status_code == 200
        assert response.json()["isCorrect"] is False

    def test_delete_cascades_to_attempts(self, client, admin, student, answer, attempt):
        assert client.delete(f"/answers/{answer['id']}", headers=student.headers).status_code == 200
        response = client.get(f"/answer-attempts/{attempt['id']}", headers=admin.headers)
        assert response.status_code == 404


class TestAnswerAttempts:
    def test_create(self, attempt, answer):
        assert attempt["answerId"] == answer["id"]
        assert attempt["timeSpent"] == 12.5
        assert attempt["attemptAt"]

    def test_unknown_answer(self, client, student):
        response = client.post(
            "/answer-attempts", json={"answerId": str(uuid4()), "isCorrect": True}, headers=student.headers
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Resposta não encontrada."

    def test_cannot_attempt_someone_elses_answer(self, client, other_student, answer):
        response = client.post(
            "/answer-attempts", json={"answerId": answer["id"], "isCorrect": True}, headers=other_student.headers
        )
        assert response.status_code == 403

    def test_student_must_filter_by_own_user(self, client, student, other_student, attempt):
        assert client.get("/answer-attempts", headers=student.headers).status_code == 403
        response = client.get(f"/answer-attempts?userId={student.id}", headers=other_student.headers)
        assert response.status_code == 403

    def test_list_newest_first_with_filters(self, client, student, answer, attempt):
        later = client.post(
            "/answer-attempts",
            json={"answerId": answer["id"], "isCorrect": True, "attemptAt": "2099-01-01T00:00:00"},
            headers=student.headers,
        ).json()
        listed = client.get(f"/answer-attempts?userId={student.id}", headers=student.headers).json()
        assert [item["id"] for item in listed] == [later["id"], attempt["id"]]

        correct = client.get(
            f"/answer-attempts?userId={student.id}&isCorrect=true", headers=student.headers
        ).json()
        assert [item["id"] for item in correct] == [later["id"]]

    def test_admin_lists_everything(self, client, admin, attempt):
        listed = client.get("/answer-attempts", headers=admin.headers).json()
        assert [item["id"] for item in listed] == [attempt["id"]]

    def test_update_without_id_in_body(self, client, student, attempt):
        response = client.patch(
            f"/answer-attempts/{attempt['id']}", json={"isCorrect": True}, headers=student.headers
        )
        assert response.status_code == 200
        assert response.json()["isCorrect"] is True

    def test_update_missing(self, client, admin):
        response = client.patch(f"/answer-attempts/{uuid4()}", json={"isCorrect": True}, headers=admin.headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Tentativa de resposta não encontrada."

    def test_delete_twice(self, client, student, attempt):
        assert client.delete(f"/answer-attempts/{attempt['id']}", headers=student.headers).status_code == 200
        assert client.delete(f"/answer-attempts/{attempt['id']}", headers=student.headers).status_code == 404

    def test_other_user_cannot_delete(self, client, other_student, attempt):
        response = client.delete(f"/answer-attempts/{attempt['id']}", headers=other_student.headers)
        assert response.status_code == 403
