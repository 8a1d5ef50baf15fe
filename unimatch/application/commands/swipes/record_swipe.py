"""
Record Swipe Command.

Steps:
1. Save the swipe
2. On a like, check whether the target already liked the swiper
3. On a mutual like, open a conversation between the two and report the match
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from unimatch.application.common.interfaces import Command, CommandHandler
from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.ports.repositories import ConversationRepository, SwipeRepository
from unimatch.domain.value_objects.conversation_id import ConversationId

logger = getLogger(__name__)


@dataclass(frozen=True)
class SwipeResult:
    matched: bool
    conversation_id: Optional[ConversationId] = None


@dataclass(frozen=True)
class RecordSwipeCommand(Command[SwipeResult]):
    swipe: Swipe


class RecordSwipeHandler(CommandHandler[SwipeResult]):
    def __init__(
        self,
        swipe_repository: SwipeRepository,
        conversation_repository: ConversationRepository,
    ):
        self._swipe_repository = swipe_repository
        self._conversation_repository = conversation_repository

    async def execute(self, command: RecordSwipeCommand) -> SwipeResult:
        swipe = command.swipe
        await self._swipe_repository.save(swipe)

        if not swipe.liked:
            return SwipeResult(matched=False)

        mutual = await self._swipe_repository.has_liked(swipe.target_id, swipe.user_id)
        if not mutual:
            return SwipeResult(matched=False)

        conversation_id = await self._conversation_repository.create(
            swipe.user_id, swipe.target_id
        )
        logger.info(
            f"[Swipes] mutual match {swipe.user_id} <-> {swipe.target_id}, conversation {conversation_id}"
        )
        return SwipeResult(matched=True, conversation_id=conversation_id)
