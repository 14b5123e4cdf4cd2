"""Lookup and update of the per user completion state of exercises."""

from classroom.exceptions.exercises import ExerciseNotFoundError, ExerciseUserInfoNotFoundError, NotInCourseError
from classroom.exceptions.validation import EmptyUsernameError, InvalidExerciseIdError, InvalidFinishedError
from classroom.logger import get_logger
from classroom.models import Exercise, ExerciseUserInfo
from classroom.repositories.exercise_user_info import ExerciseUserInfoRepository


logger = get_logger(__name__)


def validate_exercise_id(exercise_id: int) -> None:
    if isinstance(exercise_id, bool) or not isinstance(exercise_id, int) or exercise_id < 0:
        raise InvalidExerciseIdError


def validate_username(username: str) -> None:
    if not isinstance(username, str) or not username:
        raise EmptyUsernameError


def validate_finished(finished: bool) -> None:
    if not isinstance(finished, bool):
        raise InvalidFinishedError


class ExerciseInfoService:
    def __init__(self, repository: ExerciseUserInfoRepository | None = None) -> None:
        self.repository = repository or ExerciseUserInfoRepository()

    async def get_exercise_user_info(self, exercise_id: int, username: str) -> ExerciseUserInfo:
        """Return the info of a user for an exercise."""

        validate_exercise_id(exercise_id)
        validate_username(username)

        logger.debug(f"Looking up exercise user info for exercise {exercise_id} and user {username}")
        if not (info := await self.repository.find_by_exercise_and_username(exercise_id, username)):
            logger.warning(f"No exercise user info for exercise {exercise_id} and user {username}")
            raise ExerciseUserInfoNotFoundError

        return info

    async def update_exercise_user_info(self, exercise_id: int, username: str, finished: bool) -> ExerciseUserInfo:
        """Mark an exercise as finished (or not finished) for a user."""

        validate_finished(finished)
        info = await self.get_exercise_user_info(exercise_id, username)
        info.finished = finished

        logger.info(f"Setting finished={finished} for exercise {exercise_id} and user {username}")
        return await self.repository.save(info)

    async def get_all_student_exercise_user_info(
        self, exercise_id: int, requester_username: str
    ) -> list[ExerciseUserInfo]:
        """
        Return the infos of all students of an exercise.

        Infos of users holding the teacher role are left out, even if they are students as well.
        Membership of the requester in the course is not checked here, see :meth:`check_in_course`.
        """

        validate_exercise_id(exercise_id)
        validate_username(requester_username)

        logger.debug(f"Listing student infos for exercise {exercise_id} requested by {requester_username}")
        return [info for info in await self.repository.find_by_exercise(exercise_id) if not info.user.is_teacher]

    async def check_in_course(self, exercise_id: int, username: str) -> Exercise:
        """Return the exercise if the user is a member of its course."""

        validate_exercise_id(exercise_id)
        validate_username(username)

        if not (exercise := await self.repository.find_exercise(exercise_id)):
            raise ExerciseNotFoundError
        if not exercise.course.has_user(username):
            logger.warning(f"User {username} is not in the course of exercise {exercise_id}")
            raise NotInCourseError

        return exercise
