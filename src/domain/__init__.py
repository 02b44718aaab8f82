"""Domain layer - Pure business logic.

This layer contains the business entities, enums, errors and protocols
(ports). It has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Account, Institution, OneTimeCredential
- enums/: Roles, statuses, credential purposes and kinds
- errors/: Credential lifecycle errors
- protocols/: Repository and service interfaces
"""
