"""Email validation DTOs for API responses."""

from typing import Literal, Optional
from pydantic import BaseModel

from unimatch.domain.services import InstitutionInfo, ValidationResult


class ValidationResultDTO(BaseModel):
    is_valid: bool
    domain: str
    confidence: Literal["high", "medium", "low"]
    reason: str
    country: Optional[str] = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultDTO":
        return cls(
            is_valid=result.is_valid,
            domain=result.domain,
            confidence=result.confidence.value,
            reason=result.reason,
            country=result.country,
        )


class InstitutionDTO(BaseModel):
    name: str
    country: str

    @classmethod
    def from_info(cls, info: InstitutionInfo) -> "InstitutionDTO":
        return cls(name=info.name, country=info.country)
