"""
ENTITIES - Business objects with identity

Pure Python dataclasses (no ORM, no Pydantic). The records themselves are
owned by the remote data service; these are the shapes the backend reads.
"""

from unimatch.domain.entities.message_request import MessageRequest, MessageRequestStatus
from unimatch.domain.entities.swipe import Swipe

__all__ = [
    "MessageRequest",
    "MessageRequestStatus",
    "Swipe",
]
