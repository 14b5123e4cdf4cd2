from pydantic import BaseModel, Field


class ExerciseUserInfo(BaseModel):
    exercise_id: int = Field(description="ID of the exercise")
    username: str = Field(description="Username of the user")
    finished: bool = Field(description="Whether the user has finished the exercise")
