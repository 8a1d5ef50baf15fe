"""SuggestDomains Query."""

from dataclasses import dataclass

from unimatch.application.common.interfaces import Query, QueryHandler
from unimatch.domain.services import EmailClassifier


@dataclass(frozen=True)
class SuggestDomainsQuery(Query[list[str]]):
    partial_email: str


class SuggestDomainsHandler(QueryHandler[list[str]]):
    def __init__(self, classifier: EmailClassifier):
        self._classifier = classifier

    async def execute(self, query: SuggestDomainsQuery) -> list[str]:
        return self._classifier.suggest_domains(query.partial_email)
