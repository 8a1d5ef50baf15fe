"""
DOMAIN LAYER - The Heart of the Application

This layer contains:
- Entities: Business objects with identity (MessageRequest, Swipe)
- Value Objects: Immutable types (UserId, ConversationId, MessageRequestId)
- Services: Pure domain logic (EmailClassifier, DomainRegistry)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, httpx, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
