"""
DOMAIN EXCEPTIONS - Business rule violations and data service failures

These exceptions are raised by domain/application logic and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from unimatch.domain.exceptions.validation_error import DomainValidationError
from unimatch.domain.exceptions.data_service_error import (
    DataServiceError,
    DataServiceUnavailableError,
)

__all__ = [
    "DomainValidationError",
    "DataServiceError",
    "DataServiceUnavailableError",
]
