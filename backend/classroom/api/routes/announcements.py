"""Announcement routes."""

from fastapi import APIRouter, status

from classroom.api.deps import CurrentUser, Service
from classroom.schemas.announcements import AnnouncementCreate, AnnouncementRead

router = APIRouter(prefix="/announcements", tags=["announcements"])


@router.get("/", response_model=list[AnnouncementRead])
async def view_announcements(
    current_user: CurrentUser,
    service: Service,
) -> list[AnnouncementRead]:
    """List announcements, most recent first."""
    return [AnnouncementRead.model_validate(a) for a in service.view_announcements()]


@router.post("/", response_model=AnnouncementRead, status_code=status.HTTP_201_CREATED)
async def post_announcement(
    data: AnnouncementCreate,
    current_user: CurrentUser,
    service: Service,
) -> AnnouncementRead:
    """Post an announcement (teacher/admin)."""
    announcement = service.post_announcement(current_user, data.text)
    return AnnouncementRead.model_validate(announcement)
