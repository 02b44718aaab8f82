"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_database, get_login_user_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, clock, security, email)
- repositories: Repository factories
- auth_handlers: Authentication handler factories
- account_handlers: Account administration handler factories
- institution_handlers: Institution handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_clock,
    get_code_generator,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_policy,
    get_password_service,
    get_session_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_account_repository,
    get_institution_repository,
    get_one_time_credential_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    build_one_time_token_service,
    get_change_password_handler,
    get_login_user_handler,
    get_logout_handler,
    get_refresh_session_handler,
    get_register_admin_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)

# Account handlers
from src.core.container.account_handlers import (
    get_account_profile_handler,
    get_list_institution_accounts_handler,
    get_provision_account_handler,
    get_set_account_status_handler,
)

# Institution handlers
from src.core.container.institution_handlers import (
    get_create_institution_handler,
    get_list_institutions_handler,
    get_update_institution_status_handler,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_code_generator",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_policy",
    "get_password_service",
    "get_session_token_service",
    # Repositories
    "get_account_repository",
    "get_institution_repository",
    "get_one_time_credential_repository",
    # Auth handlers
    "build_one_time_token_service",
    "get_change_password_handler",
    "get_login_user_handler",
    "get_logout_handler",
    "get_refresh_session_handler",
    "get_register_admin_handler",
    "get_request_password_reset_handler",
    "get_resend_verification_handler",
    "get_reset_password_handler",
    "get_verify_email_handler",
    # Account handlers
    "get_account_profile_handler",
    "get_list_institution_accounts_handler",
    "get_provision_account_handler",
    "get_set_account_status_handler",
    # Institution handlers
    "get_create_institution_handler",
    "get_list_institutions_handler",
    "get_update_institution_status_handler",
]
