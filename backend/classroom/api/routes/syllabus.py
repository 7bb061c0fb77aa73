"""Subject and topic routes."""

from fastapi import APIRouter, status

from classroom.api.deps import CurrentUser, Service
from classroom.schemas.syllabus import (
    SubjectCompletion,
    SubjectCreate,
    TopicAddResponse,
    TopicCreate,
    TopicListResponse,
    TopicRead,
)

router = APIRouter(prefix="/subjects", tags=["syllabus"])


@router.get("/", response_model=list[str])
async def list_subjects(current_user: CurrentUser, service: Service) -> list[str]:
    """List subject names in creation order."""
    return service.list_subjects()


@router.post("/", response_model=SubjectCompletion, status_code=status.HTTP_201_CREATED)
async def create_subject(
    data: SubjectCreate,
    current_user: CurrentUser,
    service: Service,
) -> SubjectCompletion:
    """Create a subject (teacher/admin). Returns 409 if it exists."""
    service.create_subject(current_user, data.name)
    return SubjectCompletion(subject=data.name, completion_percent=0.0)


@router.get("/{subject}/topics", response_model=TopicListResponse)
async def view_topics(
    subject: str,
    current_user: CurrentUser,
    service: Service,
) -> TopicListResponse:
    """List a subject's topics sorted by name."""
    topics = service.view_topics(subject)
    return TopicListResponse(
        subject=subject,
        topics=[TopicRead(name=name, completed=completed) for name, completed in topics],
    )


@router.post(
    "/{subject}/topics",
    response_model=TopicAddResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_topic(
    subject: str,
    data: TopicCreate,
    current_user: CurrentUser,
    service: Service,
) -> TopicAddResponse:
    """
    Add a topic to a subject (teacher/admin).

    Adding an existing name changes nothing; ``created`` is then false.
    """
    created = service.add_topic(current_user, subject, data.name)
    return TopicAddResponse(subject=subject, name=data.name, created=created)


@router.post("/{subject}/topics/complete", response_model=TopicRead)
async def mark_topic_complete(
    subject: str,
    data: TopicCreate,
    current_user: CurrentUser,
    service: Service,
) -> TopicRead:
    """Mark a topic complete (teacher/admin). Idempotent."""
    service.mark_topic_complete(current_user, subject, data.name)
    return TopicRead(name=data.name, completed=True)


@router.get("/{subject}/completion", response_model=SubjectCompletion)
async def subject_completion(
    subject: str,
    current_user: CurrentUser,
    service: Service,
) -> SubjectCompletion:
    """Percentage of the subject's topics marked complete."""
    return SubjectCompletion(
        subject=subject,
        completion_percent=service.subject_completion(subject),
    )
