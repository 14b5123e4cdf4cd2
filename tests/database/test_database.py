import pytest

from classroom.database import DB
from classroom.repositories.exercise_user_info import ExerciseUserInfoRepository


async def test__context__binds_session(database: DB) -> None:
    async with database.context() as session:
        assert database.session is session

    with pytest.raises(RuntimeError):
        database.session


async def test__context__nested_restores_outer_session(database: DB, exercise_id: int) -> None:
    repository = ExerciseUserInfoRepository(database)

    async with database.context() as outer:
        async with database.context() as inner:
            assert database.session is inner
            assert len(await repository.find_by_exercise(exercise_id)) == 3

        assert database.session is outer
        assert len(await repository.find_by_exercise(exercise_id)) == 3

    with pytest.raises(RuntimeError):
        database.session


async def test__context__restores_session_on_error(database: DB) -> None:
    with pytest.raises(ValueError):
        async with database.context():
            raise ValueError

    with pytest.raises(RuntimeError):
        database.session
