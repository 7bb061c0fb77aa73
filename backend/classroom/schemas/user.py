"""User schemas."""

from typing import Any, Literal

from pydantic import ConfigDict, field_validator

from classroom.core.users import Role
from classroom.schemas.base import BaseSchema, Credential

RoleType = Literal["student", "teacher", "admin"]


def role_from_name(name: RoleType) -> Role:
    return Role[name.upper()]


class UserCreate(BaseSchema):
    """Schema for registering a user."""

    model_config = ConfigDict(str_strip_whitespace=False)

    username: Credential
    password: Credential
    role: RoleType = "student"


class UserRead(BaseSchema):
    """Schema for reading user data. The password is never returned."""

    id: int
    username: str
    role: RoleType

    @field_validator("role", mode="before")
    @classmethod
    def role_name(cls, v: Any) -> Any:
        """Accept core ``Role`` values as well as their lowercase names."""
        if isinstance(v, Role):
            return v.name.lower()
        return v
