"""Announcement schemas."""

from classroom.schemas.base import BaseSchema, LongText, TimestampMixin


class AnnouncementCreate(BaseSchema):
    text: LongText


class AnnouncementRead(BaseSchema, TimestampMixin):
    text: str
