import os
from typing import AsyncIterator

import pytest


os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from classroom.database import DB, get_database  # noqa: E402
from classroom.models import Course, Exercise, ExerciseUserInfo, Role, User  # noqa: E402


def make_user(username: str, *roles: Role) -> User:
    return User(username=username, email=f"{username}@example.com", name="John", last_name="Doe", roles=list(roles))


@pytest.fixture
async def database() -> AsyncIterator[DB]:
    database = get_database("sqlite+aiosqlite://")
    await database.create_tables()
    yield database
    await database.engine.dispose()


@pytest.fixture
async def exercise_id(database: DB) -> int:
    """Create a course with one teacher and two students and return the id of its exercise."""

    async with database.context():
        student_role = await database.add(Role(name="ROLE_STUDENT"))
        teacher_role = await database.add(Role(name="ROLE_TEACHER"))
        teacher = await database.add(make_user("johndoe", student_role, teacher_role))
        student1 = await database.add(make_user("johndoejr", student_role))
        student2 = await database.add(make_user("johndoejr2", student_role))
        outsider = await database.add(make_user("janedoe", student_role))
        course = await database.add(Course(name="Spring Boot Course", users_in_course=[teacher, student1, student2]))
        exercise = await database.add(Exercise(name="Exercise 1", course=course))
        other = await database.add(Exercise(name="Exercise 2", course=course))
        for user, finished in [(teacher, False), (student1, False), (student2, True)]:
            await database.add(ExerciseUserInfo(exercise, user, finished))
        await database.add(ExerciseUserInfo(other, outsider, True))
        await database.flush()
        return exercise.id
