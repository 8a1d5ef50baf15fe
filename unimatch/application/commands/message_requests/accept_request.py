"""Accept Message Request Command."""

from dataclasses import dataclass
from logging import getLogger

from unimatch.application.common.interfaces import Command, CommandHandler
from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.value_objects.conversation_id import ConversationId
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class AcceptMessageRequestCommand(Command[ConversationId]):
    request_id: MessageRequestId
    recipient_id: UserId


class AcceptMessageRequestHandler(CommandHandler[ConversationId]):
    """
    Accepts a pending request and returns the conversation it unlocked.

    Whether the request is still pending and addressed to this recipient is
    decided by the data service; a refusal propagates as DataServiceError
    and no conversation id is returned.
    """

    def __init__(self, message_request_service: MessageRequestService):
        self._service = message_request_service

    async def execute(self, command: AcceptMessageRequestCommand) -> ConversationId:
        try:
            conversation_id = await self._service.accept_request(
                command.request_id, command.recipient_id
            )
        except DataServiceError as e:
            logger.warning(
                f"[MessageRequests] accept {command.request_id} failed: {e.message}"
            )
            raise

        logger.info(
            f"[MessageRequests] request {command.request_id} accepted, conversation {conversation_id}"
        )
        return conversation_id
