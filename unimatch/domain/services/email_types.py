"""Value types produced by the EmailClassifier."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Confidence(str, Enum):
    """How sure the classifier is about its verdict."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    domain: str
    confidence: Confidence
    reason: str
    country: Optional[str] = None  # only set on registry hits


@dataclass(frozen=True)
class InstitutionInfo:
    name: str
    country: str
