import os
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-unimatch-tests-0123456789")
os.environ.setdefault("SUPABASE_JWT_AUDIENCE", "authenticated")

import jwt
import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from unimatch.config.settings import Config
from unimatch.domain.entities.message_request import MessageRequest, MessageRequestStatus
from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.ports.repositories import (
    ConversationRepository,
    MessageRequestRepository,
    SwipeRepository,
)
from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.fastapi_app import create_fastapi_app
from unimatch.setup.ioc import ApplicationProvider


# ==================== IN-MEMORY DATA SERVICE ====================


class InMemoryMessageRequests(MessageRequestService, MessageRequestRepository):
    """
    Stand-in for the remote procedures: a request leaves ``pending`` exactly
    once, and a rejection blocks the sender for ``cooldown``.
    """

    def __init__(self, cooldown: Optional[timedelta] = timedelta(days=30)):
        self.cooldown = cooldown
        self.requests: dict[str, MessageRequest] = {}
        self.blocked_until: dict[tuple[str, str], Optional[datetime]] = {}
        self.conversations: dict[str, ConversationId] = {}
        self.cooldowns_applied = 0
        self.calls = 0
        # Raised by every call when set, e.g. DataServiceUnavailableError()
        self.fail_with: Optional[Exception] = None

    def add_pending(self, sender_id: UserId, recipient_id: UserId, text: str = "hey") -> MessageRequest:
        request = MessageRequest(
            id=MessageRequestId(str(uuid.uuid4())),
            sender_id=sender_id,
            recipient_id=recipient_id,
            initial_message=text,
            created_at=datetime.now(timezone.utc),
        )
        self.requests[request.id.value] = request
        return request

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _pending_for(self, request_id: MessageRequestId, recipient_id: UserId) -> MessageRequest:
        request = self.requests.get(request_id.value)
        if request is None or not request.is_addressed_to(recipient_id):
            raise DataServiceError("Message request not found", code="P0002")
        if request.status is not MessageRequestStatus.PENDING:
            raise DataServiceError("Message request is no longer pending", code="P0001")
        return request

    async def send_request(self, sender_id: UserId, recipient_id: UserId, content: str) -> None:
        self.calls += 1
        self._maybe_fail()
        if (sender_id.value, recipient_id.value) in self.blocked_until:
            raise DataServiceError("You cannot send another request to this user yet")
        for request in self.requests.values():
            if (
                request.sender_id == sender_id
                and request.recipient_id == recipient_id
                and request.status is MessageRequestStatus.PENDING
            ):
                raise DataServiceError("You already have a pending request to this user")
        self.add_pending(sender_id, recipient_id, content)

    async def accept_request(self, request_id: MessageRequestId, recipient_id: UserId) -> ConversationId:
        self.calls += 1
        self._maybe_fail()
        request = self._pending_for(request_id, recipient_id)
        request.status = MessageRequestStatus.ACCEPTED
        conversation_id = ConversationId(str(uuid.uuid4()))
        self.conversations[request_id.value] = conversation_id
        return conversation_id

    async def reject_request(self, request_id: MessageRequestId, recipient_id: UserId) -> Optional[datetime]:
        self.calls += 1
        self._maybe_fail()
        request = self._pending_for(request_id, recipient_id)
        request.status = MessageRequestStatus.REJECTED
        blocked_until = (
            datetime.now(timezone.utc) + self.cooldown if self.cooldown is not None else None
        )
        self.blocked_until[(request.sender_id.value, request.recipient_id.value)] = blocked_until
        self.cooldowns_applied += 1
        return blocked_until

    async def get_pending_for_recipient(self, recipient_id: UserId, limit: int) -> list[MessageRequest]:
        self._maybe_fail()
        pending = [
            r
            for r in self.requests.values()
            if r.recipient_id == recipient_id and r.status is MessageRequestStatus.PENDING
        ]
        pending.sort(key=lambda r: r.created_at, reverse=True)
        return pending[:limit]


class InMemorySwipes(SwipeRepository):
    def __init__(self):
        self.swipes: list[Swipe] = []
        self.fail_with: Optional[Exception] = None

    async def save(self, swipe: Swipe) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.swipes.append(swipe)

    async def has_liked(self, user_id: UserId, target_id: UserId) -> bool:
        return any(
            s.user_id == user_id and s.target_id == target_id and s.liked
            for s in self.swipes
        )


class InMemoryConversations(ConversationRepository):
    def __init__(self):
        self.created: list[tuple[UserId, UserId, ConversationId]] = []

    async def create(self, user1_id: UserId, user2_id: UserId) -> ConversationId:
        conversation_id = ConversationId(str(uuid.uuid4()))
        self.created.append((user1_id, user2_id, conversation_id))
        return conversation_id


class InMemoryInfrastructureProvider(Provider):
    def __init__(self, requests, swipes, conversations):
        super().__init__()
        self._requests = requests
        self._swipes = swipes
        self._conversations = conversations

    @provide(scope=Scope.APP)
    def get_message_request_service(self) -> MessageRequestService:
        return self._requests

    @provide(scope=Scope.APP)
    def get_message_request_repository(self) -> MessageRequestRepository:
        return self._requests

    @provide(scope=Scope.APP)
    def get_swipe_repository(self) -> SwipeRepository:
        return self._swipes

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return self._conversations


# ==================== FIXTURES ====================


def new_user_id() -> UserId:
    return UserId(str(uuid.uuid4()))


def access_token(user_id: UserId, email: str = "student@mit.edu") -> str:
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user_id.value,
            "email": email,
            "aud": Config.SUPABASE_JWT_AUDIENCE,
            "role": "authenticated",
            "iat": now,
            "exp": now + 300,
        },
        Config.SUPABASE_JWT_SECRET,
        algorithm="HS256",
    )


@pytest.fixture()
def alice() -> UserId:
    return new_user_id()


@pytest.fixture()
def bob() -> UserId:
    return new_user_id()


@pytest.fixture()
def message_requests() -> InMemoryMessageRequests:
    return InMemoryMessageRequests()


@pytest.fixture()
def swipes() -> InMemorySwipes:
    return InMemorySwipes()


@pytest.fixture()
def conversations() -> InMemoryConversations:
    return InMemoryConversations()


@pytest.fixture()
def app(message_requests, swipes, conversations):
    """FastAPI app wired to the in-memory data service."""
    container = make_async_container(
        ApplicationProvider(),
        InMemoryInfrastructureProvider(message_requests, swipes, conversations),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def auth_headers(alice):
    """Headers for requests made as alice."""
    return {"Authorization": f"Bearer {access_token(alice)}"}
