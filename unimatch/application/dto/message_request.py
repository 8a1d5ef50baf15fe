"""Message request DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel

from unimatch.domain.entities.message_request import MessageRequest


class MessageRequestDTO(BaseModel):
    """DTO for a pending request shown in the recipient's inbox."""

    id: str
    sender_id: str
    recipient_id: str
    initial_message: str
    created_at: datetime
    status: str

    @classmethod
    def from_entity(cls, request: MessageRequest) -> "MessageRequestDTO":
        return cls(
            id=request.id.value,
            sender_id=request.sender_id.value,
            recipient_id=request.recipient_id.value,
            initial_message=request.initial_message,
            created_at=request.created_at,
            status=request.status.value,
        )
