"""
MessageRequest Repository Port - Read access to message requests.
Implementation: unimatch/infrastructure/postgrest/postgrest_message_request_repository.py
"""

from abc import ABC, abstractmethod

from unimatch.domain.entities.message_request import MessageRequest
from unimatch.domain.value_objects.user_id import UserId


class MessageRequestRepository(ABC):
    @abstractmethod
    async def get_pending_for_recipient(
        self, recipient_id: UserId, limit: int
    ) -> list[MessageRequest]: ...
