from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classroom.database import Base
from classroom.settings import settings


user_roles = Table(
    "classroom_user_roles",
    Base.metadata,
    Column("user_id", ForeignKey("classroom_users.id"), primary_key=True),
    Column("role_id", ForeignKey("classroom_roles.id"), primary_key=True),
)


class Role(Base):
    __tablename__ = "classroom_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), unique=True)

    def __repr__(self) -> str:
        return f"<Role {self.name}>"


class User(Base):
    __tablename__ = "classroom_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True)
    email: Mapped[str] = mapped_column(String(256), unique=True)
    name: Mapped[str] = mapped_column(String(256))
    last_name: Mapped[str] = mapped_column(String(256))
    roles: Mapped[list[Role]] = relationship(secondary=user_roles, lazy="selectin")

    def has_role(self, name: str) -> bool:
        return any(role.name == name for role in self.roles)

    @property
    def is_teacher(self) -> bool:
        return self.has_role(settings.teacher_role)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
