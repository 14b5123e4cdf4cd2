from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classroom.database import Base


if TYPE_CHECKING:
    from .exercises import Exercise
    from .users import User


course_users = Table(
    "classroom_course_users",
    Base.metadata,
    Column("course_id", ForeignKey("classroom_courses.id"), primary_key=True),
    Column("user_id", ForeignKey("classroom_users.id"), primary_key=True),
)


class Course(Base):
    __tablename__ = "classroom_courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(256))
    users_in_course: Mapped[list[User]] = relationship(secondary=course_users, lazy="selectin")
    exercises: Mapped[list[Exercise]] = relationship(back_populates="course", lazy="selectin")

    def has_user(self, username: str) -> bool:
        return any(user.username == username for user in self.users_in_course)

    def __repr__(self) -> str:
        return f"<Course {self.name}>"
