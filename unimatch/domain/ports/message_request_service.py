"""
MessageRequestService Port - Remote procedures owning the request lifecycle.
Implementation: unimatch/infrastructure/postgrest/postgrest_message_request_service.py

The data service is the only authority on transitions, uniqueness and the
rejection cooldown. Implementations make exactly one remote call per method
and raise DataServiceError when the service refuses.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId


class MessageRequestService(ABC):
    @abstractmethod
    async def send_request(
        self, sender_id: UserId, recipient_id: UserId, content: str
    ) -> None: ...

    @abstractmethod
    async def accept_request(
        self, request_id: MessageRequestId, recipient_id: UserId
    ) -> ConversationId:
        """Return the id of the (possibly pre-existing) conversation."""
        ...

    @abstractmethod
    async def reject_request(
        self, request_id: MessageRequestId, recipient_id: UserId
    ) -> Optional[datetime]:
        """Return when the sender's block ends, or None if not reported."""
        ...
