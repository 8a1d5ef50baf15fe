"""
Message Requests API Router - First-contact gate before a chat unlocks.

Flow:
  POST /message-requests              → pending request created
  POST /message-requests/{id}/accept  → conversation id (client opens chat)
  POST /message-requests/{id}/reject  → sender blocked until blocked_until
  GET  /message-requests/pending      → re-fetched after every accept/reject

Each endpoint performs one data service call. Refusals from the service
(already resolved, not found, not addressed to you, cooldown active) come
back as 400 with the service's message; connectivity failures as 503.
"""

from datetime import datetime
from logging import getLogger
from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from unimatch.application.commands.message_requests import (
    AcceptMessageRequestCommand,
    AcceptMessageRequestHandler,
    RejectMessageRequestCommand,
    RejectMessageRequestHandler,
    SendMessageRequestCommand,
    SendMessageRequestHandler,
)
from unimatch.application.dto.message_request import MessageRequestDTO
from unimatch.application.queries.message_requests import (
    ListPendingRequestsHandler,
    ListPendingRequestsQuery,
)
from unimatch.config.settings import Config
from unimatch.domain.exceptions import DataServiceError, DataServiceUnavailableError
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequestBody(BaseModel):
    recipient_id: str
    content: str = Field(..., min_length=1, max_length=2000)


class SendMessageRequestResponse(BaseModel):
    success: bool


class AcceptMessageRequestResponse(BaseModel):
    conversation_id: str


class RejectMessageRequestResponse(BaseModel):
    blocked_until: Optional[datetime] = None
    cooldown_notice: str


class PendingRequestsResponse(BaseModel):
    requests: list[MessageRequestDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/message-requests", tags=["message-requests"])


def _raise_service_error(e: DataServiceError) -> NoReturn:
    if isinstance(e, DataServiceUnavailableError):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        ) from e
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


def _request_id(raw: str) -> MessageRequestId:
    try:
        return MessageRequestId(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=SendMessageRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message_request(
    body: SendMessageRequestBody,
    handler: FromDishka[SendMessageRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Send a first message to someone you have no conversation with yet."""
    try:
        recipient_id = UserId(body.recipient_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid recipient id: {body.recipient_id}",
        ) from e

    if recipient_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot send a message request to yourself",
        )
    if not body.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message cannot be empty",
        )

    try:
        await handler.execute(
            SendMessageRequestCommand(
                sender_id=current_user.id,
                recipient_id=recipient_id,
                content=body.content,
            )
        )
    except DataServiceError as e:
        _raise_service_error(e)

    return SendMessageRequestResponse(success=True)


@router.post(
    "/{request_id}/accept",
    response_model=AcceptMessageRequestResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def accept_message_request(
    request_id: str,
    handler: FromDishka[AcceptMessageRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Accept a pending request; the response names the unlocked conversation."""
    command = AcceptMessageRequestCommand(
        request_id=_request_id(request_id),
        recipient_id=current_user.id,
    )
    try:
        conversation_id = await handler.execute(command)
    except DataServiceError as e:
        _raise_service_error(e)

    return AcceptMessageRequestResponse(conversation_id=conversation_id.value)


@router.post(
    "/{request_id}/reject",
    response_model=RejectMessageRequestResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def reject_message_request(
    request_id: str,
    handler: FromDishka[RejectMessageRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Decline a pending request; the sender is blocked for a cooldown."""
    command = RejectMessageRequestCommand(
        request_id=_request_id(request_id),
        recipient_id=current_user.id,
    )
    try:
        outcome = await handler.execute(command)
    except DataServiceError as e:
        _raise_service_error(e)

    return RejectMessageRequestResponse(
        blocked_until=outcome.blocked_until,
        cooldown_notice=outcome.cooldown_notice,
    )


@router.get(
    "/pending",
    response_model=PendingRequestsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_pending_requests(
    handler: FromDishka[ListPendingRequestsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Requests waiting for the current user's decision, newest first."""
    query = ListPendingRequestsQuery(
        recipient_id=current_user.id, limit=Config.PENDING_REQUEST_LIMIT
    )
    try:
        requests = await handler.execute(query)
    except DataServiceError as e:
        _raise_service_error(e)

    return PendingRequestsResponse(
        requests=[MessageRequestDTO.from_entity(r) for r in requests]
    )
