"""
MessageRequest Entity - A first-contact attempt awaiting the recipient's decision.

Lifecycle (transitions are decided by the data service, never locally):

    pending ──accept──> accepted   (conversation exists)
       └────reject──> rejected     (sender blocked for a cooldown)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId


class MessageRequestStatus(str, Enum):
    """Lifecycle states of a message request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class MessageRequest:
    id: MessageRequestId
    sender_id: UserId
    recipient_id: UserId
    initial_message: str
    created_at: datetime
    status: MessageRequestStatus = MessageRequestStatus.PENDING

    def is_addressed_to(self, user_id: UserId) -> bool:
        return self.recipient_id == user_id
