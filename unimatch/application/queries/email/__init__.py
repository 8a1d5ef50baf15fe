"""University email queries."""

from unimatch.application.queries.email.check_email import (
    CheckEmailQuery,
    CheckEmailHandler,
    EmailCheckResult,
)
from unimatch.application.queries.email.suggest_domains import (
    SuggestDomainsQuery,
    SuggestDomainsHandler,
)

__all__ = [
    "CheckEmailQuery",
    "CheckEmailHandler",
    "EmailCheckResult",
    "SuggestDomainsQuery",
    "SuggestDomainsHandler",
]
