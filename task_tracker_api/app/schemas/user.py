"""
Pydantic models for user accounts and authentication.

Passwords never leave the API: ``UserRead`` exposes only the id and the
username.  Credential rules mirror what the sign-up form enforces.
"""

from pydantic import BaseModel, Field

# At least one upper-case and one lower-case letter, plus either a digit
# or a non-word character.
PASSWORD_PATTERN = r"^(?=.*[A-Z])(?=.*[a-z])(?=.*(\d|\W)).*$"


class AuthCredentials(BaseModel):
    """Username/password pair used for both sign-up and sign-in."""

    # Lookaheads in PASSWORD_PATTERN need the ``re`` engine.
    model_config = {"regex_engine": "python-re"}

    username: str = Field(..., min_length=4, max_length=20)
    password: str = Field(
        ...,
        min_length=8,
        max_length=20,
        pattern=PASSWORD_PATTERN,
        description="8-20 characters with upper and lower case letters and a digit or symbol",
    )


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str

    model_config = {
        "from_attributes": True,
    }


class AccessToken(BaseModel):
    """Response body of ``POST /auth/signin``."""

    access_token: str
    token_type: str = "bearer"
