"""
MessageRequestId Value Object - UUID wrapper for message request identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MessageRequestId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid message request ID (UUID): {self.value}")

    def __str__(self) -> str:
        return self.value
