"""
Reject Message Request Command.

The sender's cooldown is computed by the data service. This handler only
relays the returned ``blocked_until`` and builds the notice shown to the
recipient, falling back to a generic "<N> days" text when the service
returns no timestamp.
"""

from dataclasses import dataclass
from datetime import datetime
from logging import getLogger
from typing import Optional

from unimatch.application.common.interfaces import Command, CommandHandler
from unimatch.domain.exceptions import DataServiceError
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.value_objects.message_request_id import MessageRequestId
from unimatch.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class RejectionOutcome:
    blocked_until: Optional[datetime]
    cooldown_notice: str


@dataclass(frozen=True)
class RejectMessageRequestCommand(Command[RejectionOutcome]):
    request_id: MessageRequestId
    recipient_id: UserId


class RejectMessageRequestHandler(CommandHandler[RejectionOutcome]):
    def __init__(
        self,
        message_request_service: MessageRequestService,
        fallback_cooldown_days: int,
    ):
        self._service = message_request_service
        self._fallback_cooldown_days = fallback_cooldown_days

    async def execute(self, command: RejectMessageRequestCommand) -> RejectionOutcome:
        try:
            blocked_until = await self._service.reject_request(
                command.request_id, command.recipient_id
            )
        except DataServiceError as e:
            logger.warning(
                f"[MessageRequests] reject {command.request_id} failed: {e.message}"
            )
            raise

        logger.info(
            f"[MessageRequests] request {command.request_id} rejected, blocked_until={blocked_until}"
        )
        return RejectionOutcome(
            blocked_until=blocked_until,
            cooldown_notice=self._cooldown_notice(blocked_until),
        )

    def _cooldown_notice(self, blocked_until: Optional[datetime]) -> str:
        if blocked_until is not None:
            return (
                "They won't be able to send you another request until "
                f"{blocked_until.strftime('%B %d, %Y')}."
            )
        return (
            "They won't be able to send you another request for "
            f"{self._fallback_cooldown_days} days."
        )
