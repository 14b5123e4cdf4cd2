from starlette import status

from classroom.exceptions.api_exception import APIException


class ExerciseNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Exercise not found"
    description = "The requested exercise does not exist."


class ExerciseUserInfoNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Exercise user info not found"
    description = "The requested user has no info for this exercise."


class NotInCourseError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Not in course"
    description = "The user is not a member of the exercise's course."
