"""
List Pending Requests Query.

The inbox of requests still awaiting the recipient's decision. Callers
re-run this after every accept/reject instead of patching a local copy.
"""

from dataclasses import dataclass

from unimatch.application.common.interfaces import Query, QueryHandler
from unimatch.config.settings import Config
from unimatch.domain.entities.message_request import MessageRequest
from unimatch.domain.ports.repositories import MessageRequestRepository
from unimatch.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListPendingRequestsQuery(Query[list[MessageRequest]]):
    recipient_id: UserId
    limit: int = Config.PENDING_REQUEST_LIMIT


class ListPendingRequestsHandler(QueryHandler[list[MessageRequest]]):
    def __init__(self, message_request_repository: MessageRequestRepository):
        self._repository = message_request_repository

    async def execute(self, query: ListPendingRequestsQuery) -> list[MessageRequest]:
        return await self._repository.get_pending_for_recipient(
            query.recipient_id, query.limit
        )
