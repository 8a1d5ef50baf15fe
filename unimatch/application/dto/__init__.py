"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- email.py           → ValidationResultDTO, InstitutionDTO
- message_request.py → MessageRequestDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from unimatch.application.dto.email import ValidationResultDTO, InstitutionDTO
from unimatch.application.dto.message_request import MessageRequestDTO

__all__ = [
    "ValidationResultDTO",
    "InstitutionDTO",
    "MessageRequestDTO",
]
