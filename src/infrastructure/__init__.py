"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, repositories and the Database handle
- security/: bcrypt hashing, JWT session tokens, one-time code generation
- email/: Stub and AWS SES notification senders
- logging/: structlog console adapter
- clock.py: System clock

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
