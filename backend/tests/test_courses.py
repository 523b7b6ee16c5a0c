"""Tests for courses, modules and lessons."""

from uuid import uuid4

import pytest


@pytest.fixture
def enroll(client, admin):
    def _enroll(user, course, status="ACTIVE"):
        response = client.post(
            "/enrollments",
            json={"userId": user.id, "courseId": course["id"], "status": status},
            headers=admin.headers,
        )
        assert response.status_code == 201
        return response.json()

    return _enroll


class TestCourses:
    def test_teacher_creates_own_course(self, course, teacher):
        assert course["instructorId"] == teacher.id
        assert course["isPublished"] is False

    def test_teacher_cannot_create_for_other_instructor(self, client, teacher, make_user):
        other = make_user("TEACHER")
        response = client.post(
            "/courses",
            json={"title": "Redes", "description": "OSI", "instructorId": other.id},
            headers=teacher.headers,
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Não autorizado a criar curso para outro instrutor."

    def test_student_cannot_create(self, client, student):
        response = client.post(
            "/courses",
            json={"title": "X", "description": "Y", "instructorId": student.id},
            headers=student.headers,
        )
        assert response.status_code == 403

    def test_invalid_thumbnail_and_price(self, client, teacher):
        response = client.post(
            "/courses",
            json={
                "title": "X",
                "description": "Y",
                "instructorId": teacher.id,
                "thumbnail": "not a url",
                "price": -10,
            },
            headers=teacher.headers,
        )
        assert response.status_code == 400
        paths = {error["path"] for error in response.json()["errors"]}
        assert {"thumbnail", "price"} <= paths

    def test_title_filter_is_case_insensitive(self, client, student, course):
        found = client.get("/courses?title=sql", headers=student.headers).json()
        assert [c["id"] for c in found] == [course["id"]]
        assert client.get("/courses?title=redes", headers=student.headers).json() == []

    def test_title_filter_matches_wildcards_literally(self, client, student, course):
        assert client.get("/courses?title=%25", headers=student.headers).json() == []
        assert client.get("/courses?title=_", headers=student.headers).json() == []

    def test_filters_combine(self, client, teacher, course):
        client.patch(f"/courses/{course['id']}", json={"isPublished": True}, headers=teacher.headers)
        published = client.get(
            f"/courses?instructorId={teacher.id}&isPublished=true", headers=teacher.headers
        ).json()
        drafts = client.get(
            f"/courses?instructorId={teacher.id}&isPublished=false", headers=teacher.headers
        ).json()
        assert [c["id"] for c in published] == [course["id"]]
        assert drafts == []

    def test_detail_includes_modules_and_lessons(self, client, student, course, module, lesson):
        body = client.get(f"/courses/{course['id']}", headers=student.headers).json()
        assert body["modules"][0]["id"] == module["id"]
        assert body["modules"][0]["lessons"][0]["id"] == lesson["id"]

    def test_other_teacher_cannot_update(self, client, make_user, course):
        intruder = make_user("TEACHER")
        response = client.patch(f"/courses/{course['id']}", json={"title": "Meu"}, headers=intruder.headers)
        assert response.status_code == 403

    def test_delete_twice(self, client, teacher, course):
        assert client.delete(f"/courses/{course['id']}", headers=teacher.headers).status_code == 200
        assert client.delete(f"/courses/{course['id']}", headers=teacher.headers).status_code == 404


class TestModules:
    def test_order_unique_per_course(self, client, teacher, course, module):
        response = client.post(
            "/modules",
            json={"title": "Outro", "courseId": course["id"], "order": module["order"]},
            headers=teacher.headers,
        )
        assert response.status_code == 409

    def test_unknown_course(self, client, teacher):
        response = client.post(
            "/modules", json={"title": "X", "courseId": str(uuid4()), "order": 1}, headers=teacher.headers
        )
        assert response.status_code == 404

    def test_teacher_cannot_add_to_foreign_course(self, client, make_user, course):
        intruder = make_user("TEACHER")
        response = client.post(
            "/modules", json={"title": "X", "courseId": course["id"], "order": 2}, headers=intruder.headers
        )
        assert response.status_code == 403

    def test_list_filtered_by_course(self, client, student, course, module):
        listed = client.get(f"/modules?courseId={course['id']}", headers=student.headers).json()
        assert [m["id"] for m in listed] == [module["id"]]

    def test_update_and_delete(self, client, teacher, module):
        response = client.patch(f"/modules/{module['id']}", json={"title": "Renomeado"}, headers=teacher.headers)
        assert response.json()["title"] == "Renomeado"
        assert client.delete(f"/modules/{module['id']}", headers=teacher.headers).status_code == 200
        assert client.get(f"/modules/{module['id']}", headers=teacher.headers).status_code == 404


class TestLessons:
    def test_unknown_module(self, client, teacher):
        response = client.post(
            "/lessons",
            json={"title": "X", "content": "Y", "lessonType": "TEXT", "moduleId": str(uuid4()), "order": 1},
            headers=teacher.headers,
        )
        assert response.status_code == 404

    def test_teacher_cannot_add_to_foreign_module(self, client, make_user, module):
        intruder = make_user("TEACHER")
        response = client.post(
            "/lessons",
            json={"title": "X", "content": "Y", "lessonType": "VIDEO", "moduleId": module["id"], "order": 2},
            headers=intruder.headers,
        )
        assert response.status_code == 403

    def test_student_must_pass_course_id(self, client, student, lesson):
        response = client.get("/lessons", headers=student.headers)
        assert response.status_code == 400

    def test_student_needs_enrollment(self, client, student, course, lesson, enroll):
        assert client.get(f"/lessons?courseId={course['id']}", headers=student.headers).status_code == 403
        assert client.get(f"/lessons/{lesson['id']}", headers=student.headers).status_code == 403

        enroll(student, course)
        listed = client.get(f"/lessons?courseId={course['id']}", headers=student.headers).json()
        assert [item["id"] for item in listed] == [lesson["id"]]
        assert client.get(f"/lessons/{lesson['id']}", headers=student.headers).status_code == 200

    def test_cancelled_enrollment_gives_no_access(self, client, student, course, lesson, enroll):
        enroll(student, course, status="CANCELLED")
        assert client.get(f"/lessons/{lesson['id']}", headers=student.headers).status_code == 403

    def test_teacher_sees_only_own_lessons(self, client, make_user, teacher, lesson):
        other = make_user("TEACHER")
        assert [item["id"] for item in client.get("/lessons", headers=teacher.headers).json()] == [lesson["id"]]
        assert client.get("/lessons", headers=other.headers).json() == []

    def test_admin_sees_all(self, client, admin, lesson):
        assert len(client.get("/lessons", headers=admin.headers).json()) == 1

    def test_owning_teacher_updates(self, client, teacher, lesson):
        response = client.patch(
            f"/lessons/{lesson['id']}",
            json={"videoUrl": "https://example.com/aula.mp4", "lessonType": "VIDEO"},
            headers=teacher.headers,
        )
        assert response.status_code == 200
        assert response.json()["lessonType"] == "VIDEO"
        assert response.json()["videoUrl"].startswith("https://example.com/")

    def test_student_cannot_update(self, client, student, lesson):
        response = client.patch(f"/lessons/{lesson['id']}", json={"title": "X"}, headers=student.headers)
        assert response.status_code == 403

    def test_only_admin_deletes(self, client, admin, teacher, lesson):
        assert client.delete(f"/lessons/{lesson['id']}", headers=teacher.headers).status_code == 403
        assert client.delete(f"/lessons/{lesson['id']}", headers=admin.headers).status_code == 200
        assert client.delete(f"/lessons/{lesson['id']}", headers=admin.headers).status_code == 404
