"""
Tests for the PostgREST adapters against httpx.MockTransport.

Run with: pytest tests/test_postgrest_adapters.py -v
"""

import asyncio
import json
import uuid
from datetime import datetime, timezone

import httpx
import pytest

from unimatch.domain.entities.message_request import MessageRequestStatus
from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.exceptions import DataServiceError, DataServiceUnavailableError
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.infrastructure.postgrest import (
    PostgrestClient,
    PostgrestConversationRepository,
    PostgrestMessageRequestRepository,
    PostgrestMessageRequestService,
    PostgrestSwipeRepository,
    parse_timestamp,
)

BASE_URL = "http://data.test/rest/v1"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_client(recorder: Recorder) -> PostgrestClient:
    http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder))
    return PostgrestClient(http)


def run(coro):
    return asyncio.run(coro)


def uid() -> UserId:
    return UserId(str(uuid.uuid4()))


class TestMessageRequestService:
    def test_send_calls_rpc_with_params(self):
        recorder = Recorder(httpx.Response(204))
        service = PostgrestMessageRequestService(make_client(recorder))
        sender, recipient = uid(), uid()

        run(service.send_request(sender, recipient, "hello"))

        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/rest/v1/rpc/send_message_request"
        assert json.loads(request.content) == {
            "p_sender": sender.value,
            "p_recipient": recipient.value,
            "p_content": "hello",
        }

    def test_accept_scalar_result(self):
        conversation = str(uuid.uuid4())
        recorder = Recorder(httpx.Response(200, json=conversation))
        service = PostgrestMessageRequestService(make_client(recorder))
        request_id = MessageRequestId(str(uuid.uuid4()))
        recipient = uid()

        result = run(service.accept_request(request_id, recipient))

        assert result.value == conversation
        assert recorder.requests[0].url.path == "/rest/v1/rpc/accept_message_request"
        assert json.loads(recorder.requests[0].content) == {
            "p_request_id": request_id.value,
            "p_recipient": recipient.value,
        }

    def test_accept_object_result(self):
        conversation = str(uuid.uuid4())
        recorder = Recorder(httpx.Response(200, json={"conversation_id": conversation}))
        service = PostgrestMessageRequestService(make_client(recorder))

        result = run(service.accept_request(MessageRequestId(str(uuid.uuid4())), uid()))
        assert result.value == conversation

    def test_accept_without_conversation_raises(self):
        recorder = Recorder(httpx.Response(200, json=None))
        service = PostgrestMessageRequestService(make_client(recorder))

        with pytest.raises(DataServiceError):
            run(service.accept_request(MessageRequestId(str(uuid.uuid4())), uid()))

    def test_service_error_message_is_verbatim(self):
        recorder = Recorder(
            httpx.Response(
                400,
                json={
                    "code": "P0001",
                    "message": "Request is not pending",
                    "details": None,
                    "hint": None,
                },
            )
        )
        service = PostgrestMessageRequestService(make_client(recorder))

        with pytest.raises(DataServiceError) as exc_info:
            run(service.accept_request(MessageRequestId(str(uuid.uuid4())), uid()))
        assert exc_info.value.message == "Request is not pending"
        assert exc_info.value.code == "P0001"
        assert not isinstance(exc_info.value, DataServiceUnavailableError)

    def test_reject_returns_timestamp(self):
        recorder = Recorder(httpx.Response(200, json="2026-11-18T10:00:00Z"))
        service = PostgrestMessageRequestService(make_client(recorder))

        blocked_until = run(service.reject_request(MessageRequestId(str(uuid.uuid4())), uid()))
        assert blocked_until == datetime(2026, 11, 18, 10, 0, tzinfo=timezone.utc)
        assert recorder.requests[0].url.path == "/rest/v1/rpc/reject_message_request"

    def test_reject_object_result(self):
        recorder = Recorder(
            httpx.Response(200, json={"blocked_until": "2026-11-18T10:00:00+00:00"})
        )
        service = PostgrestMessageRequestService(make_client(recorder))

        blocked_until = run(service.reject_request(MessageRequestId(str(uuid.uuid4())), uid()))
        assert blocked_until.year == 2026

    def test_reject_trimmed_fractional_seconds(self):
        recorder = Recorder(
            httpx.Response(200, json={"blocked_until": "2026-11-18T14:45:00.12345+00:00"})
        )
        service = PostgrestMessageRequestService(make_client(recorder))

        blocked_until = run(service.reject_request(MessageRequestId(str(uuid.uuid4())), uid()))
        assert blocked_until == datetime(2026, 11, 18, 14, 45, 0, 123450, tzinfo=timezone.utc)

    def test_reject_without_timestamp(self):
        recorder = Recorder(httpx.Response(200, json=None))
        service = PostgrestMessageRequestService(make_client(recorder))

        assert run(service.reject_request(MessageRequestId(str(uuid.uuid4())), uid())) is None

    def test_transport_failure(self):
        recorder = Recorder(httpx.ConnectError("connection refused"))
        service = PostgrestMessageRequestService(make_client(recorder))

        with pytest.raises(DataServiceUnavailableError):
            run(service.send_request(uid(), uid(), "hello"))


class TestMessageRequestRepository:
    def test_pending_query_and_mapping(self):
        recipient, sender = uid(), uid()
        row = {
            "id": str(uuid.uuid4()),
            "sender_id": sender.value,
            "recipient_id": recipient.value,
            "initial_message": "hey there",
            "created_at": "2026-10-18T09:30:00.123456+00:00",
            "status": "pending",
        }
        recorder = Recorder(httpx.Response(200, json=[row]))
        repository = PostgrestMessageRequestRepository(make_client(recorder))

        requests = run(repository.get_pending_for_recipient(recipient, 25))

        params = recorder.requests[0].url.params
        assert recorder.requests[0].url.path == "/rest/v1/message_requests"
        assert params["recipient_id"] == f"eq.{recipient.value}"
        assert params["status"] == "eq.pending"
        assert params["order"] == "created_at.desc"
        assert params["limit"] == "25"

        assert len(requests) == 1
        assert requests[0].sender_id == sender
        assert requests[0].status is MessageRequestStatus.PENDING
        assert requests[0].created_at.tzinfo is not None

    def test_pending_row_with_trimmed_fractional_seconds(self):
        recipient = uid()
        row = {
            "id": str(uuid.uuid4()),
            "sender_id": uid().value,
            "recipient_id": recipient.value,
            "initial_message": "hi",
            "created_at": "2026-10-19T14:45:00.1234+00:00",
            "status": "pending",
        }
        recorder = Recorder(httpx.Response(200, json=[row]))
        repository = PostgrestMessageRequestRepository(make_client(recorder))

        requests = run(repository.get_pending_for_recipient(recipient, 10))
        assert requests[0].created_at == datetime(
            2026, 10, 19, 14, 45, 0, 123400, tzinfo=timezone.utc
        )


class TestSwipeAndConversationRepositories:
    def test_save_swipe(self):
        recorder = Recorder(httpx.Response(201, json=[{"id": 1}]))
        repository = PostgrestSwipeRepository(make_client(recorder))
        user, target = uid(), uid()

        run(repository.save(Swipe(user, target, liked=True, super_like=True)))

        request = recorder.requests[0]
        assert request.url.path == "/rest/v1/matches"
        assert request.headers["Prefer"] == "return=representation"
        assert json.loads(request.content) == {
            "user_id": user.value,
            "matched_user_id": target.value,
            "is_liked": True,
            "is_super_like": True,
        }

    def test_has_liked(self):
        recorder = Recorder(httpx.Response(200, json=[{"id": 7}]), httpx.Response(200, json=[]))
        repository = PostgrestSwipeRepository(make_client(recorder))
        user, target = uid(), uid()

        assert run(repository.has_liked(user, target)) is True
        assert run(repository.has_liked(user, target)) is False
        assert recorder.requests[0].url.params["is_liked"] == "is.true"

    def test_create_conversation(self):
        conversation = str(uuid.uuid4())
        recorder = Recorder(httpx.Response(201, json=[{"id": conversation}]))
        repository = PostgrestConversationRepository(make_client(recorder))

        result = run(repository.create(uid(), uid()))
        assert result.value == conversation

    def test_create_conversation_empty_response(self):
        recorder = Recorder(httpx.Response(201, json=[]))
        repository = PostgrestConversationRepository(make_client(recorder))

        with pytest.raises(DataServiceError):
            run(repository.create(uid(), uid()))


class TestParseTimestamp:
    def test_empty(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None

    def test_garbage(self):
        with pytest.raises(DataServiceError):
            parse_timestamp("next tuesday")

    def test_zulu_suffix(self):
        assert parse_timestamp("2026-11-18T10:00:00Z") == datetime(
            2026, 11, 18, 10, 0, tzinfo=timezone.utc
        )
