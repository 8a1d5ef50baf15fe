"""
CheckEmail Query - Live feedback for the signup email field.

Combines the classifier verdict with the institution lookup in one call.
"""

from dataclasses import dataclass
from typing import Optional

from unimatch.application.common.interfaces import Query, QueryHandler
from unimatch.domain.services import EmailClassifier, InstitutionInfo, ValidationResult


@dataclass(frozen=True)
class EmailCheckResult:
    validation: ValidationResult
    institution: Optional[InstitutionInfo]


@dataclass(frozen=True)
class CheckEmailQuery(Query[EmailCheckResult]):
    email: str


class CheckEmailHandler(QueryHandler[EmailCheckResult]):
    def __init__(self, classifier: EmailClassifier):
        self._classifier = classifier

    async def execute(self, query: CheckEmailQuery) -> EmailCheckResult:
        return EmailCheckResult(
            validation=self._classifier.classify(query.email),
            institution=self._classifier.institution_info(query.email),
        )
