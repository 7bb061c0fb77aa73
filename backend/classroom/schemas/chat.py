"""Pydantic schemas for chat operations."""

from pydantic import BaseModel

from classroom.schemas.base import BaseSchema, Credential, LongText, TimestampMixin


# Request schemas
class MessageSendRequest(BaseModel):
    """Request to send a message to another user."""

    peer_username: Credential
    text: LongText


# Response schemas
class MessageRead(BaseSchema, TimestampMixin):
    """A single chat message."""

    sender_id: int
    sender_username: str
    text: str


class MessageListResponse(BaseModel):
    """Messages between the current user and a peer."""

    peer_username: str
    messages: list[MessageRead]
    total: int
