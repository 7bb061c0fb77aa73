"""
API routes for pairwise chat.

Messages use inbox semantics: viewing a conversation with a peer shows only
what that peer sent to you. The transcript endpoint merges both directions.
"""

from fastapi import APIRouter, status

from classroom.api.deps import CurrentUser, Service
from classroom.core.chat import Message
from classroom.schemas.chat import MessageListResponse, MessageRead, MessageSendRequest
from classroom.schemas.user import UserRead
from classroom.services import ClassroomService

router = APIRouter(prefix="/chat", tags=["chat"])


def _message_read(service: ClassroomService, message: Message) -> MessageRead:
    return MessageRead(
        sender_id=message.sender_id,
        sender_username=service.username_of(message.sender_id),
        text=message.text,
        timestamp=message.timestamp,
    )


@router.get("/peers", response_model=list[UserRead])
async def list_peers(current_user: CurrentUser, service: Service) -> list[UserRead]:
    """List users the current user has a chat relationship with."""
    peers = []
    for peer_id in service.peers(current_user):
        user = service.get_user(peer_id)
        if user is not None:
            peers.append(UserRead.model_validate(user))
    return peers


@router.post("/messages", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: MessageSendRequest,
    current_user: CurrentUser,
    service: Service,
) -> MessageRead:
    """Send a message to another user, creating the relationship if needed."""
    message = service.send_message(current_user, request.peer_username, request.text)
    return _message_read(service, message)


@router.get("/messages/{peer_username}", response_model=MessageListResponse)
async def view_messages(
    peer_username: str,
    current_user: CurrentUser,
    service: Service,
) -> MessageListResponse:
    """Messages the peer has sent to the current user, oldest first."""
    messages = service.view_messages(current_user, peer_username)
    return MessageListResponse(
        peer_username=peer_username,
        messages=[_message_read(service, m) for m in messages],
        total=len(messages),
    )


@router.get("/transcript/{peer_username}", response_model=MessageListResponse)
async def view_transcript(
    peer_username: str,
    current_user: CurrentUser,
    service: Service,
) -> MessageListResponse:
    """Both directions of the conversation with a peer, merged by time."""
    messages = service.transcript(current_user, peer_username)
    return MessageListResponse(
        peer_username=peer_username,
        messages=[_message_read(service, m) for m in messages],
        total=len(messages),
    )
