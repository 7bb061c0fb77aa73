"""Assignment and submission routes."""

from fastapi import APIRouter, status

from classroom.api.deps import CurrentUser, Service
from classroom.core.errors import NotFound
from classroom.core.scheduler import Assignment, Submission
from classroom.schemas.assignments import (
    AssignmentCreate,
    AssignmentRead,
    SubmissionCreate,
    SubmissionRead,
)
from classroom.services import ClassroomService

router = APIRouter(prefix="/assignments", tags=["assignments"])


def _submission_read(service: ClassroomService, submission: Submission) -> SubmissionRead:
    return SubmissionRead(
        student_id=submission.student_id,
        student_username=service.username_of(submission.student_id),
        filename=submission.filename,
        timestamp=submission.timestamp,
    )


def _assignment_read(service: ClassroomService, assignment: Assignment) -> AssignmentRead:
    return AssignmentRead(
        id=assignment.id,
        title=assignment.title,
        description=assignment.description,
        due_date=assignment.due_date,
        submissions=[_submission_read(service, s) for s in assignment.submissions],
    )


@router.get("/", response_model=list[AssignmentRead])
async def list_assignments(current_user: CurrentUser, service: Service) -> list[AssignmentRead]:
    """List every assignment ordered by due date, with submissions."""
    return [_assignment_read(service, a) for a in service.list_assignments()]


@router.post("/", response_model=AssignmentRead, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    data: AssignmentCreate,
    current_user: CurrentUser,
    service: Service,
) -> AssignmentRead:
    """
    Create an assignment (teacher/admin).

    Returns 507 when the assignment store is at capacity.
    """
    assignment = service.create_assignment(
        current_user, data.title, data.description, data.due_date
    )
    return _assignment_read(service, assignment)


@router.get("/next", response_model=AssignmentRead)
async def next_assignment(current_user: CurrentUser, service: Service) -> AssignmentRead:
    """The assignment with the earliest due date; 404 when there are none."""
    assignment = service.next_assignment()
    if assignment is None:
        raise NotFound("No assignments")
    return _assignment_read(service, assignment)


@router.get("/{assignment_id}", response_model=AssignmentRead)
async def get_assignment(
    assignment_id: int,
    current_user: CurrentUser,
    service: Service,
) -> AssignmentRead:
    """Get a specific assignment by ID."""
    return _assignment_read(service, service.get_assignment(assignment_id))


@router.post(
    "/{assignment_id}/submissions",
    response_model=SubmissionRead,
    status_code=status.HTTP_201_CREATED,
)
async def submit_assignment(
    assignment_id: int,
    data: SubmissionCreate,
    current_user: CurrentUser,
    service: Service,
) -> SubmissionRead:
    """Submit an assignment (students only). Repeat submissions are all kept."""
    submission = service.submit_assignment(current_user, assignment_id, data.filename)
    return _submission_read(service, submission)
