"""
PostgREST adapters - Data service implementations of domain ports.
"""

from unimatch.infrastructure.postgrest.client import (
    PostgrestClient,
    create_http_client,
    parse_timestamp,
)
from unimatch.infrastructure.postgrest.postgrest_message_request_service import (
    PostgrestMessageRequestService,
)
from unimatch.infrastructure.postgrest.postgrest_message_request_repository import (
    PostgrestMessageRequestRepository,
)
from unimatch.infrastructure.postgrest.postgrest_swipe_repository import (
    PostgrestSwipeRepository,
)
from unimatch.infrastructure.postgrest.postgrest_conversation_repository import (
    PostgrestConversationRepository,
)

__all__ = [
    "PostgrestClient",
    "create_http_client",
    "parse_timestamp",
    "PostgrestMessageRequestService",
    "PostgrestMessageRequestRepository",
    "PostgrestSwipeRepository",
    "PostgrestConversationRepository",
]
