"""
Dishka DI Container Setup.

Two providers:
- InfrastructureProvider: the shared httpx client and the PostgREST
  implementations of every domain port
- ApplicationProvider: domain services (registry, classifier) and the
  command/query handlers, which only ask for abstract ports

Keeping them apart lets tests pair ApplicationProvider with an in-memory
provider for the same ports.

Scopes:
- Scope.APP = created once at startup, shared across requests
- Scope.REQUEST = new instance per HTTP request
"""

from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from unimatch.application.commands.message_requests import (
    AcceptMessageRequestHandler,
    RejectMessageRequestHandler,
    SendMessageRequestHandler,
)
from unimatch.application.commands.swipes import RecordSwipeHandler
from unimatch.application.queries.email import CheckEmailHandler, SuggestDomainsHandler
from unimatch.application.queries.message_requests import ListPendingRequestsHandler
from unimatch.config.settings import Config
from unimatch.domain.ports import MessageRequestService
from unimatch.domain.ports.repositories import (
    ConversationRepository,
    MessageRequestRepository,
    SwipeRepository,
)
from unimatch.domain.services import DomainRegistry, EmailClassifier
from unimatch.infrastructure.postgrest import (
    PostgrestClient,
    PostgrestConversationRepository,
    PostgrestMessageRequestRepository,
    PostgrestMessageRequestService,
    PostgrestSwipeRepository,
    create_http_client,
)


class InfrastructureProvider(Provider):
    """Data service client and port implementations."""

    # ==================== HTTP CLIENT ====================

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterable[httpx.AsyncClient]:
        """Shared connection pool, closed when the container closes."""
        client = create_http_client()
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_postgrest_client(self, http_client: httpx.AsyncClient) -> PostgrestClient:
        return PostgrestClient(http_client)

    # ==================== PORTS ====================

    @provide(scope=Scope.REQUEST)
    def get_message_request_service(self, client: PostgrestClient) -> MessageRequestService:
        return PostgrestMessageRequestService(client)

    @provide(scope=Scope.REQUEST)
    def get_message_request_repository(
        self, client: PostgrestClient
    ) -> MessageRequestRepository:
        return PostgrestMessageRequestRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_swipe_repository(self, client: PostgrestClient) -> SwipeRepository:
        return PostgrestSwipeRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, client: PostgrestClient) -> ConversationRepository:
        return PostgrestConversationRepository(client)


class ApplicationProvider(Provider):
    """Domain services and use-case handlers."""

    # ==================== DOMAIN SERVICES ====================

    @provide(scope=Scope.APP)
    def get_domain_registry(self) -> DomainRegistry:
        return DomainRegistry.default()

    @provide(scope=Scope.APP)
    def get_email_classifier(self, registry: DomainRegistry) -> EmailClassifier:
        return EmailClassifier(registry)

    # ==================== EMAIL HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_check_email_handler(self, classifier: EmailClassifier) -> CheckEmailHandler:
        return CheckEmailHandler(classifier)

    @provide(scope=Scope.REQUEST)
    def get_suggest_domains_handler(
        self, classifier: EmailClassifier
    ) -> SuggestDomainsHandler:
        return SuggestDomainsHandler(classifier)

    # ==================== MESSAGE REQUEST HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_request_handler(
        self, service: MessageRequestService
    ) -> SendMessageRequestHandler:
        return SendMessageRequestHandler(service)

    @provide(scope=Scope.REQUEST)
    def get_accept_message_request_handler(
        self, service: MessageRequestService
    ) -> AcceptMessageRequestHandler:
        return AcceptMessageRequestHandler(service)

    @provide(scope=Scope.REQUEST)
    def get_reject_message_request_handler(
        self, service: MessageRequestService
    ) -> RejectMessageRequestHandler:
        return RejectMessageRequestHandler(
            service, fallback_cooldown_days=Config.REQUEST_COOLDOWN_FALLBACK_DAYS
        )

    @provide(scope=Scope.REQUEST)
    def get_list_pending_requests_handler(
        self, repository: MessageRequestRepository
    ) -> ListPendingRequestsHandler:
        return ListPendingRequestsHandler(repository)

    # ==================== SWIPE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_record_swipe_handler(
        self,
        swipe_repository: SwipeRepository,
        conversation_repository: ConversationRepository,
    ) -> RecordSwipeHandler:
        return RecordSwipeHandler(swipe_repository, conversation_repository)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup.
    """
    return make_async_container(InfrastructureProvider(), ApplicationProvider())
