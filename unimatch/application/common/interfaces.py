"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class AcceptMessageRequestCommand(Command[ConversationId]):
        request_id: MessageRequestId
        recipient_id: UserId

    class AcceptMessageRequestHandler(CommandHandler[ConversationId]):
        def __init__(self, service: MessageRequestService):
            self._service = service

        async def execute(self, cmd: AcceptMessageRequestCommand) -> ConversationId:
            return await self._service.accept_request(cmd.request_id, cmd.recipient_id)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
