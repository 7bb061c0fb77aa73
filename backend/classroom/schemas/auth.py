"""Authentication schemas."""

from pydantic import ConfigDict, Field

from classroom.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Request schema for username/password login."""

    # Credentials are compared exactly, surrounding whitespace included
    model_config = ConfigDict(str_strip_whitespace=False)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    """Response schema for successful authentication."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token expiry in seconds")
