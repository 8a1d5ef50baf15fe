"""
API Routers - FastAPI endpoint definitions.
"""

from unimatch.presentation.api.email import router as email_router
from unimatch.presentation.api.message_requests import router as message_requests_router
from unimatch.presentation.api.swipes import router as swipes_router

__all__ = [
    "email_router",
    "message_requests_router",
    "swipes_router",
]
