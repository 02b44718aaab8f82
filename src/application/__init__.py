"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Services: Credential engines shared by handlers

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: One-time token engine, password policy, generated identifiers
- dtos/: Hash-free results returned by handlers

The application layer orchestrates domain logic but contains no business rules.
"""
