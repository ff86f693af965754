"""Authentication schemas."""

from pydantic import BaseModel, model_validator
from pydantic_core import PydanticCustomError

MIN_PASSWORD_LENGTH = 8


class SignInRequest(BaseModel):
    """Sign-in request."""

    username: str = ""
    password: str = ""

    @model_validator(mode="after")
    def check_username(self) -> "SignInRequest":
        if not self.username:
            raise PydanticCustomError("missing_username", "no username provided")
        return self


class SignUpRequest(SignInRequest):
    """Registration request."""

    @model_validator(mode="after")
    def check_password(self) -> "SignUpRequest":
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "short_password",
                "password minimum length should be at least {min_length}",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        return self
