from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classroom.database import Base


if TYPE_CHECKING:
    from .courses import Course


class Exercise(Base):
    __tablename__ = "classroom_exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(256))
    course_id: Mapped[int] = mapped_column(ForeignKey("classroom_courses.id"))
    course: Mapped[Course] = relationship(back_populates="exercises", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Exercise {self.id} {self.name}>"
