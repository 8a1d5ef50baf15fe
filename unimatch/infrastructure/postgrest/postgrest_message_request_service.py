"""
PostgREST Message Request Service.

Implements MessageRequestService by calling the database's stored procedures:
- send_message_request(p_sender, p_recipient, p_content)
- accept_message_request(p_request_id, p_recipient) -> conversation id
- reject_message_request(p_request_id, p_recipient) -> blocked_until

Procedures may return a bare scalar or a JSON object; both shapes are read.
"""

from datetime import datetime
from typing import Any, Optional

from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.infrastructure.postgrest.client import PostgrestClient, parse_timestamp


def _unwrap(result: Any, key: str) -> Any:
    """Pull ``key`` out of an object/one-row result, or return the scalar."""
    if isinstance(result, list):
        result = result[0] if result else None
    if isinstance(result, dict):
        return result.get(key)
    return result


class PostgrestMessageRequestService(MessageRequestService):
    _client: PostgrestClient

    def __init__(self, client: PostgrestClient):
        self._client = client

    async def send_request(
        self, sender_id: UserId, recipient_id: UserId, content: str
    ) -> None:
        await self._client.rpc(
            "send_message_request",
            {
                "p_sender": sender_id.value,
                "p_recipient": recipient_id.value,
                "p_content": content,
            },
        )

    async def accept_request(
        self, request_id: MessageRequestId, recipient_id: UserId
    ) -> ConversationId:
        result = await self._client.rpc(
            "accept_message_request",
            {"p_request_id": request_id.value, "p_recipient": recipient_id.value},
        )
        raw_id = _unwrap(result, "conversation_id")
        if not raw_id:
            raise DataServiceError("Message request could not be accepted")
        try:
            return ConversationId(str(raw_id))
        except ValueError as e:
            raise DataServiceError(f"Invalid conversation id from data service: {raw_id}") from e

    async def reject_request(
        self, request_id: MessageRequestId, recipient_id: UserId
    ) -> Optional[datetime]:
        result = await self._client.rpc(
            "reject_message_request",
            {"p_request_id": request_id.value, "p_recipient": recipient_id.value},
        )
        return parse_timestamp(_unwrap(result, "blocked_until"))
