"""Message request commands."""

from .send_request import SendMessageRequestCommand, SendMessageRequestHandler
from .accept_request import AcceptMessageRequestCommand, AcceptMessageRequestHandler
from .reject_request import (
    RejectMessageRequestCommand,
    RejectMessageRequestHandler,
    RejectionOutcome,
)

__all__ = [
    "SendMessageRequestCommand",
    "SendMessageRequestHandler",
    "AcceptMessageRequestCommand",
    "AcceptMessageRequestHandler",
    "RejectMessageRequestCommand",
    "RejectMessageRequestHandler",
    "RejectionOutcome",
]
