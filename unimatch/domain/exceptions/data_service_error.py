"""
DataServiceError - The remote data service rejected an operation.
Maps to: HTTP 400 Bad Request (message shown to the user verbatim)

DataServiceUnavailableError - The data service could not be reached.
Maps to: HTTP 503 Service Unavailable
"""

from typing import Optional


class DataServiceError(Exception):
    """Operation rejected by the data service, carrying its message."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class DataServiceUnavailableError(DataServiceError):
    """Transport or connectivity failure talking to the data service."""

    def __init__(self, message: str = "Data service unavailable, please try again"):
        super().__init__(message, code="unavailable")
