"""Swipes API Router - Discovery likes/passes and mutual-match detection."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from unimatch.application.commands.swipes import RecordSwipeCommand, RecordSwipeHandler
from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.exceptions import (
    DataServiceError,
    DataServiceUnavailableError,
    DomainValidationError,
)
from unimatch.domain.value_objects.user_id import UserId
from unimatch.presentation.dependencies.auth import AuthUser, get_current_user


class SwipeRequest(BaseModel):
    target_id: str
    liked: bool
    super_like: bool = False


class SwipeResponse(BaseModel):
    matched: bool
    conversation_id: Optional[str] = None


router = APIRouter(prefix="/swipes", tags=["swipes"])


@router.post(
    "",
    response_model=SwipeResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def record_swipe(
    request: SwipeRequest,
    handler: FromDishka[RecordSwipeHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Record a like or pass; a mutual like opens a conversation."""
    try:
        target_id = UserId(request.target_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid target id: {request.target_id}",
        ) from e

    try:
        swipe = Swipe(
            user_id=current_user.id,
            target_id=target_id,
            liked=request.liked,
            super_like=request.super_like,
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    try:
        result = await handler.execute(RecordSwipeCommand(swipe=swipe))
    except DataServiceUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        ) from e
    except DataServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    return SwipeResponse(
        matched=result.matched,
        conversation_id=result.conversation_id.value if result.conversation_id else None,
    )
