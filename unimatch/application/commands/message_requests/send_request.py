"""
Send Message Request Command.

Creates a pending request from sender to recipient. Uniqueness and cooldown
rules are enforced by the data service; its refusal message is re-raised
unchanged so the sender sees exactly why.
"""

from dataclasses import dataclass
from logging import getLogger

from unimatch.application.common.interfaces import Command, CommandHandler
from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class SendMessageRequestCommand(Command[None]):
    sender_id: UserId
    recipient_id: UserId
    content: str


class SendMessageRequestHandler(CommandHandler[None]):
    def __init__(self, message_request_service: MessageRequestService):
        self._service = message_request_service

    async def execute(self, command: SendMessageRequestCommand) -> None:
        try:
            await self._service.send_request(
                command.sender_id, command.recipient_id, command.content
            )
        except DataServiceError as e:
            logger.warning(
                f"[MessageRequests] send {command.sender_id} -> {command.recipient_id} failed: {e.message}"
            )
            raise

        logger.info(
            f"[MessageRequests] request sent {command.sender_id} -> {command.recipient_id}"
        )
