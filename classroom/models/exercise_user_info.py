from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classroom.database import Base
from classroom.schemas import exercise_user_info


if TYPE_CHECKING:
    from .exercises import Exercise
    from .users import User


class ExerciseUserInfo(Base):
    """Tracks whether a user has finished an exercise. There is at most one per exercise and user."""

    __tablename__ = "classroom_exercise_user_info"
    __table_args__ = (UniqueConstraint("exercise_id", "user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("classroom_exercises.id"))
    exercise: Mapped[Exercise] = relationship(lazy="selectin")
    user_id: Mapped[int] = mapped_column(ForeignKey("classroom_users.id"))
    user: Mapped[User] = relationship(lazy="selectin")
    finished: Mapped[bool] = mapped_column(Boolean, default=False)

    def __init__(self, exercise: Exercise, user: User, finished: bool = False) -> None:
        super().__init__(exercise=exercise, user=user, finished=finished)

    @property
    def serialize(self) -> exercise_user_info.ExerciseUserInfo:
        return exercise_user_info.ExerciseUserInfo(
            exercise_id=self.exercise.id, username=self.user.username, finished=self.finished
        )

    def __repr__(self) -> str:
        return f"<ExerciseUserInfo exercise={self.exercise_id} user={self.user_id} finished={self.finished}>"
