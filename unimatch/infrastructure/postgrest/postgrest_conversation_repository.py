"""
PostgREST Conversation Repository.

Mapping:
- Table: conversations (id, user1_id, user2_id)
"""

from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports.repositories import ConversationRepository
from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.user_id import UserId
from unimatch.infrastructure.postgrest.client import PostgrestClient


class PostgrestConversationRepository(ConversationRepository):
    _client: PostgrestClient

    def __init__(self, client: PostgrestClient):
        self._client = client

    async def create(self, user1_id: UserId, user2_id: UserId) -> ConversationId:
        records = await self._client.insert(
            "conversations",
            {"user1_id": user1_id.value, "user2_id": user2_id.value},
        )
        if not records or not records[0].get("id"):
            raise DataServiceError("Conversation could not be created")
        return ConversationId(records[0]["id"])
