from .courses import Course
from .exercise_user_info import ExerciseUserInfo
from .exercises import Exercise
from .users import Role, User


__all__ = ["Course", "Exercise", "ExerciseUserInfo", "Role", "User"]
