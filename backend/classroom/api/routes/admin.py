"""Admin panel routes: user listing, user file export/import, syllabus report."""

from fastapi import APIRouter

from classroom.api.deps import CurrentUser, Service
from classroom.config import get_settings
from classroom.schemas.admin import (
    SyllabusReport,
    UserFileRequest,
    UserFileResponse,
    UserListResponse,
)
from classroom.schemas.syllabus import SubjectCompletion
from classroom.schemas.user import UserRead

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=UserListResponse)
async def list_users(current_user: CurrentUser, service: Service) -> UserListResponse:
    """List every registered user (admin only)."""
    users = service.list_users(current_user)
    return UserListResponse(
        users=[UserRead.model_validate(u) for u in users],
        total=len(users),
    )


@router.post("/users/export", response_model=UserFileResponse)
async def export_users(
    data: UserFileRequest,
    current_user: CurrentUser,
    service: Service,
) -> UserFileResponse:
    """
    Save all users to a pipe-delimited file (admin only).

    Returns 503 if the file cannot be opened.
    """
    path = get_settings().resolve_data_path(data.path)
    count = service.export_users(current_user, path)
    return UserFileResponse(path=data.path, count=count)


@router.post("/users/import", response_model=UserFileResponse)
async def import_users(
    data: UserFileRequest,
    current_user: CurrentUser,
    service: Service,
) -> UserFileResponse:
    """
    Load users from a pipe-delimited file (admin only).

    Existing usernames are skipped. Returns 503 if the file cannot be opened.
    """
    path = get_settings().resolve_data_path(data.path)
    count = service.import_users(current_user, path)
    return UserFileResponse(path=data.path, count=count)


@router.get("/syllabus-report", response_model=SyllabusReport)
async def syllabus_report(current_user: CurrentUser, service: Service) -> SyllabusReport:
    """Completion percentage of every subject (admin only)."""
    return SyllabusReport(
        subjects=[
            SubjectCompletion(subject=name, completion_percent=percent)
            for name, percent in service.syllabus_report(current_user)
        ]
    )
