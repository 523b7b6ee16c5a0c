"""Tests for favorite questions."""

from uuid import uuid4


class TestFavoriteQuestions:
    def test_mark_and_fetch(self, client, student, question):
        created = client.post(
            "/favorite-questions",
            json={"userId": student.id, "questionId": question["id"]},
            headers=student.headers,
        )
        assert created.status_code == 201
        assert created.json()["markedAt"]

        response = client.get(f"/favorite-questions/{student.id}/{question['id']}", headers=student.headers)
        assert response.status_code == 200
        assert response.json()["questionId"] == question["id"]

    def test_duplicate_conflicts(self, client, student, question):
        payload = {"userId": student.id, "questionId": question["id"]}
        client.post("/favorite-questions", json=payload, headers=student.headers)
        assert client.post("/favorite-questions", json=payload, headers=student.headers).status_code == 409

    def test_unknown_question(self, client, student):
        response = client.post(
            "/favorite-questions",
            json={"userId": student.id, "questionId": str(uuid4())},
            headers=student.headers,
        )
        assert response.status_code == 404

    def test_cannot_mark_for_someone_else(self, client, student, other_student, question):
        response = client.post(
            "/favorite-questions",
            json={"userId": other_student.id, "questionId": question["id"]},
            headers=student.headers,
        )
        assert response.status_code == 403

    def test_list_scoped_and_filtered(self, client, teacher, student, other_student, question, question_payload):
        second = client.post("/questions", json=question_payload, headers=teacher.headers).json()
        for q in (question, second):
            client.post(
                "/favorite-questions",
                json={"userId": student.id, "questionId": q["id"]},
                headers=student.headers,
            )

        assert len(client.get("/favorite-questions", headers=student.headers).json()) == 2
        filtered = client.get(f"/favorite-questions?questionId={second['id']}", headers=student.headers).json()
        assert [f["questionId"] for f in filtered] == [second["id"]]
        assert client.get("/favorite-questions", headers=other_student.headers).json() == []

    def test_delete_twice(self, client, student, question):
        client.post(
            "/favorite-questions",
            json={"userId": student.id, "questionId": question["id"]},
            headers=student.headers,
        )
        url = f"/favorite-questions/{student.id}/{question['id']}"
        assert client.delete(url, headers=student.headers).status_code == 200
        assert client.delete(url, headers=student.headers).status_code == 404

    def test_other_user_cannot_read(self, client, student, other_student, question):
        url = f"/favorite-questions/{student.id}/{question['id']}"
        assert client.get(url, headers=other_student.headers).status_code == 403
