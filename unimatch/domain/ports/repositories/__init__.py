"""
REPOSITORY PORTS - Table access interfaces

Each repository port is an abstract base class; infrastructure provides
PostgREST implementations.
"""

from unimatch.domain.ports.repositories.message_request_repository import (
    MessageRequestRepository,
)
from unimatch.domain.ports.repositories.swipe_repository import SwipeRepository
from unimatch.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)

__all__ = [
    "MessageRequestRepository",
    "SwipeRepository",
    "ConversationRepository",
]
