"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from unimatch.domain.value_objects.user_id import UserId
from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.message_request_id import MessageRequestId

__all__ = [
    "UserId",
    "ConversationId",
    "MessageRequestId",
]
