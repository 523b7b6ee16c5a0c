"""Tests for enrollment endpoints."""

from uuid import uuid4


def _enroll(client, admin, user_id, course_id, **extra):
    return client.post(
        "/enrollments",
        json={"userId": user_id, "courseId": course_id, **extra},
        headers=admin.headers,
    )


class TestEnrollments:
    def test_admin_enrolls_with_default_status(self, client, admin, student, course):
        response = _enroll(client, admin, student.id, course["id"])
        assert response.status_code == 201
        assert response.json()["status"] == "ACTIVE"

    def test_duplicate_conflicts(self, client, admin, student, course):
        _enroll(client, admin, student.id, course["id"])
        assert _enroll(client, admin, student.id, course["id"]).status_code == 409

    def test_only_admin_enrolls(self, client, student, course):
        response = client.post(
            "/enrollments", json={"userId": student.id, "courseId": course["id"]}, headers=student.headers
        )
        assert response.status_code == 403

    def test_unknown_course(self, client, admin, student):
        assert _enroll(client, admin, student.id, str(uuid4())).status_code == 404

    def test_invalid_status(self, client, admin, student, course):
        response = _enroll(client, admin, student.id, course["id"], status="PAUSED")
        assert response.status_code == 400

    def test_students_see_only_their_own(self, client, admin, student, other_student, course):
        mine = _enroll(client, admin, student.id, course["id"]).json()
        _enroll(client, admin, other_student.id, course["id"])

        assert [e["id"] for e in client.get("/enrollments", headers=student.headers).json()] == [mine["id"]]
        assert len(client.get("/enrollments", headers=admin.headers).json()) == 2
        assert client.get(f"/enrollments?userId={other_student.id}", headers=student.headers).status_code == 403

    def test_admin_filters_by_status(self, client, admin, student, other_student, course):
        _enroll(client, admin, student.id, course["id"])
        done = _enroll(client, admin, other_student.id, course["id"], status="COMPLETED").json()
        listed = client.get("/enrollments?status=COMPLETED", headers=admin.headers).json()
        assert [e["id"] for e in listed] == [done["id"]]

    def test_owner_reads_single(self, client, admin, student, other_student, course):
        enrollment = _enroll(client, admin, student.id, course["id"]).json()
        assert client.get(f"/enrollments/{enrollment['id']}", headers=student.headers).status_code == 200
        assert client.get(f"/enrollments/{enrollment['id']}", headers=other_student.headers).status_code == 403

    def test_any_status_transition_allowed(self, client, admin, student, course):
        enrollment = _enroll(client, admin, student.id, course["id"], status="CANCELLED").json()
        response = client.patch(
            f"/enrollments/{enrollment['id']}", json={"status": "ACTIVE"}, headers=admin.headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "ACTIVE"

    def test_student_cannot_update_or_delete(self, client, admin, student, course):
        enrollment = _enroll(client, admin, student.id, course["id"]).json()
        url = f"/enrollments/{enrollment['id']}"
        assert client.patch(url, json={"status": "COMPLETED"}, headers=student.headers).status_code == 403
        assert client.delete(url, headers=student.headers).status_code == 403

    def test_delete_twice(self, client, admin, student, course):
        enrollment = _enroll(client, admin, student.id, course["id"]).json()
        url = f"/enrollments/{enrollment['id']}"
        assert client.delete(url, headers=admin.headers).status_code == 200
        assert client.delete(url, headers=admin.headers).status_code == 404
