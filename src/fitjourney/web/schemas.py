"""Request bodies for the API.

Fields are optional so that missing values reach the services, which
report them as 400 errors with the usual message.
"""

from pydantic import BaseModel


class UserSignup(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    img: str | None = None


class UserSignin(BaseModel):
    email: str | None = None
    password: str | None = None


class WorkoutSubmission(BaseModel):
    workoutString: str | None = None
