"""Base schema configuration and shared field types."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Read straight from core dataclasses
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for the creation timestamp carried by messages and posts."""

    timestamp: datetime


# Account fields are written to the pipe-delimited user file, so they may not
# contain the field separator or line breaks.
Credential = Annotated[str, Field(min_length=1, max_length=63, pattern=r"^[^|\r\n]+$")]
# Subject names are used as a single URL path segment.
SubjectName = Annotated[str, Field(min_length=1, max_length=63, pattern=r"^[^/]+$")]
ShortText = Annotated[str, Field(min_length=1, max_length=127)]
LongText = Annotated[str, Field(min_length=1, max_length=511)]
