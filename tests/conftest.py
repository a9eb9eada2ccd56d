from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from authoring import repository as authoring_repository
from catalog import repository as catalog_repository
from core.db import StorageError
from enrollment import repository as enrollment_repository
from main import app


class FakeStore:
    """In-memory stand-in for the three tables, patched over the repository modules."""

    def __init__(self) -> None:
        self.courses: list[dict] = []
        self.enrollments: list[dict] = []
        self.fail = False
        self._course_seq = 0
        self._enrollment_seq = 0

    def _check(self) -> None:
        if self.fail:
            raise StorageError('connection refused')

    def add_course(self, *, title: str, description: str | None = None, teacher_id: int | None = None) -> dict:
        self._course_seq += 1
        course = {
            'id': self._course_seq,
            'title': title,
            'description': description,
            'teacher_id': teacher_id,
            'created_at': datetime(2026, 1, 5, 9, 0),
        }
        self.courses.append(course)
        return dict(course)

    async def list_courses(self) -> list[dict]:
        self._check()
        return [dict(c) for c in sorted(self.courses, key=lambda c: c['id'])]

    async def create_course(self, *, teacher_id, title, description) -> dict:
        self._check()
        if title is None:
            raise StorageError('null value in column "title" violates not-null constraint')
        return self.add_course(title=title, description=description, teacher_id=teacher_id)

    async def list_teacher_courses(self, *, teacher_id) -> list[dict]:
        self._check()
        return [dict(c) for c in sorted(self.courses, key=lambda c: c['id']) if c['teacher_id'] == teacher_id]

    async def update_course_description(self, *, teacher_id, course_id, description):
        self._check()
        for course in self.courses:
            if course['id'] == course_id and course['teacher_id'] == teacher_id:
                course['description'] = description
                return dict(course)
        return None

    async def course_belongs_to_teacher(self, course_id, *, teacher_id) -> bool:
        self._check()
        return any(c['id'] == course_id and c['teacher_id'] == teacher_id for c in self.courses)

    async def create_enrollment(self, *, student_id, course_id) -> dict:
        self._check()
        if not any(c['id'] == course_id for c in self.courses):
            raise StorageError('insert or update on table "enrollments" violates foreign key constraint')
        self._enrollment_seq += 1
        enrollment = {'id': self._enrollment_seq, 'student_id': student_id, 'course_id': course_id, 'progress': 0}
        self.enrollments.append(enrollment)
        return dict(enrollment)

    async def list_student_courses(self, *, student_id) -> list[dict]:
        self._check()
        by_id = {c['id']: c for c in self.courses}
        rows = [
            {**by_id[e['course_id']], 'progress': e['progress']}
            for e in self.enrollments
            if e['student_id'] == student_id and e['course_id'] in by_id
        ]
        return sorted(rows, key=lambda r: r['id'])

    async def update_progress(self, *, student_id, course_id, progress):
        self._check()
        updated = None
        for enrollment in self.enrollments:
            if enrollment['student_id'] == student_id and enrollment['course_id'] == course_id:
                enrollment['progress'] = progress
                updated = updated or dict(enrollment)
        return updated


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr(catalog_repository, 'list_courses', fake.list_courses)
    monkeypatch.setattr(authoring_repository, 'create_course', fake.create_course)
    monkeypatch.setattr(authoring_repository, 'list_teacher_courses', fake.list_teacher_courses)
    monkeypatch.setattr(authoring_repository, 'update_course_description', fake.update_course_description)
    monkeypatch.setattr(authoring_repository, 'course_belongs_to_teacher', fake.course_belongs_to_teacher)
    monkeypatch.setattr(enrollment_repository, 'create_enrollment', fake.create_enrollment)
    monkeypatch.setattr(enrollment_repository, 'list_student_courses', fake.list_student_courses)
    monkeypatch.setattr(enrollment_repository, 'update_progress', fake.update_progress)
    return fake


@pytest.fixture
def client(store: FakeStore, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv('AUTH_MODE', raising=False)
    # No `with`: the lifespan (and its DB pool) stays off.
    return TestClient(app)
