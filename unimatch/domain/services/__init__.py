"""
DOMAIN SERVICES - Pure domain logic (no I/O)
"""

from unimatch.domain.services.email_types import (
    Confidence,
    InstitutionInfo,
    ValidationResult,
)
from unimatch.domain.services.domain_registry import DomainRegistry
from unimatch.domain.services.email_classifier import EmailClassifier

__all__ = [
    "Confidence",
    "InstitutionInfo",
    "ValidationResult",
    "DomainRegistry",
    "EmailClassifier",
]
