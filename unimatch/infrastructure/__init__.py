"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- postgrest/: Supabase PostgREST client and the port implementations built on it
"""

from unimatch.infrastructure.postgrest import (
    PostgrestClient,
    create_http_client,
    PostgrestMessageRequestService,
    PostgrestMessageRequestRepository,
    PostgrestSwipeRepository,
    PostgrestConversationRepository,
)

__all__ = [
    "PostgrestClient",
    "create_http_client",
    "PostgrestMessageRequestService",
    "PostgrestMessageRequestRepository",
    "PostgrestSwipeRepository",
    "PostgrestConversationRepository",
]
