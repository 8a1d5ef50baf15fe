"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the application needs
from the remote data service, without specifying HOW it's reached.

- message_request_service.py → remote procedures for the request lifecycle
- repositories/               → table reads/writes (requests, swipes, conversations)
"""

from unimatch.domain.ports.message_request_service import MessageRequestService

__all__ = ["MessageRequestService"]
