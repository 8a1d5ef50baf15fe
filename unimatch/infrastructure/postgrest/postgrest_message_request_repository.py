"""
PostgREST MessageRequest Repository.

Mapping:
- Table: message_requests (id, sender_id, recipient_id, initial_message,
  created_at, status)
- str -> MessageRequestId/UserId, status str -> MessageRequestStatus
"""

from typing import Any

from unimatch.domain.entities.message_request import MessageRequest, MessageRequestStatus
from unimatch.domain.ports.repositories import MessageRequestRepository
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.infrastructure.postgrest.client import PostgrestClient, parse_timestamp

_COLUMNS = "id,sender_id,recipient_id,initial_message,created_at,status"


class PostgrestMessageRequestRepository(MessageRequestRepository):
    _client: PostgrestClient

    def __init__(self, client: PostgrestClient):
        self._client = client

    def _to_entity(self, record: dict[str, Any]) -> MessageRequest:
        """Map a PostgREST row to the domain entity."""
        return MessageRequest(
            id=MessageRequestId(record["id"]),
            sender_id=UserId(record["sender_id"]),
            recipient_id=UserId(record["recipient_id"]),
            initial_message=record.get("initial_message") or "",
            created_at=parse_timestamp(record["created_at"]),
            status=MessageRequestStatus(record.get("status", "pending")),
        )

    async def get_pending_for_recipient(
        self, recipient_id: UserId, limit: int
    ) -> list[MessageRequest]:
        """Pending requests addressed to recipient, newest first."""
        records = await self._client.select(
            "message_requests",
            filters={
                "recipient_id": f"eq.{recipient_id.value}",
                "status": f"eq.{MessageRequestStatus.PENDING.value}",
            },
            columns=_COLUMNS,
            order="created_at.desc",
            limit=limit,
        )
        return [self._to_entity(record) for record in records]
