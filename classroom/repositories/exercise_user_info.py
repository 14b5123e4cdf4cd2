from classroom.database import DB, db, filter_by, select
from classroom.models import Exercise, ExerciseUserInfo, User


class ExerciseUserInfoRepository:
    """Persistence access for exercise user infos."""

    def __init__(self, database: DB = db) -> None:
        self.db = database

    async def find_by_exercise_and_username(self, exercise_id: int, username: str) -> ExerciseUserInfo | None:
        return await self.db.first(
            select(ExerciseUserInfo)
            .join(ExerciseUserInfo.user)
            .where(ExerciseUserInfo.exercise_id == exercise_id, User.username == username)
        )

    async def find_by_exercise(self, exercise_id: int) -> list[ExerciseUserInfo]:
        return await self.db.all(filter_by(ExerciseUserInfo, exercise_id=exercise_id).order_by(ExerciseUserInfo.id))

    async def save(self, info: ExerciseUserInfo) -> ExerciseUserInfo:
        await self.db.add(info)
        await self.db.flush()
        return info

    async def find_exercise(self, exercise_id: int) -> Exercise | None:
        return await self.db.get(Exercise, id=exercise_id)
