from classroom.exceptions.api_exception import APIException


class InvalidExerciseIdError(APIException):
    status_code = 422
    detail = "Invalid exercise id"
    description = "The exercise id must be a non-negative integer."


class EmptyUsernameError(APIException):
    status_code = 422
    detail = "Empty username"
    description = "The username must not be empty."


class InvalidFinishedError(APIException):
    status_code = 422
    detail = "Invalid finished flag"
    description = "The finished flag must be a boolean."
