"""Message request queries."""

from unimatch.application.queries.message_requests.list_pending import (
    ListPendingRequestsQuery,
    ListPendingRequestsHandler,
)

__all__ = [
    "ListPendingRequestsQuery",
    "ListPendingRequestsHandler",
]
