"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (message requests, swipes)
- queries/   → Read operations (email checks, pending requests)
- dto/       → Data Transfer Objects for the HTTP layer
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
