"""
Conversation Repository Port - Creates conversations between matched users.
Implementation: unimatch/infrastructure/postgrest/postgrest_conversation_repository.py
"""

from abc import ABC, abstractmethod

from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def create(self, user1_id: UserId, user2_id: UserId) -> ConversationId: ...
