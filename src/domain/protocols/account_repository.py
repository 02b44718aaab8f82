"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.enums import AccountRole


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by email
        find_by_login_identifier: Resolve a login identifier for a role
        exists_by_email: Uniqueness pre-check
        count_by_institution_and_role: Per-institution head count
        list_by_institution_and_role: Institution roster for admins
        save: Create new account
        update: Persist status, verification and profile changes
        update_password: Compare-and-swap password write
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID."""
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by exact email (case-sensitive)."""
        ...

    async def find_by_login_identifier(
        self, identifier: str, role: AccountRole
    ) -> Account | None:
        """Resolve a login identifier to an account of the given role.

        Students may log in with email or student ID, lecturers with email
        or lecturer ID, admins with email only.

        Args:
            identifier: Email or role-specific secondary ID.
            role: Role the caller claims to log in as.

        Returns:
            Matching account with that role, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account already uses ``email``."""
        ...

    async def count_by_institution_and_role(
        self, institution_id: UUID, role: AccountRole
    ) -> int:
        """Count accounts with ``role`` in an institution."""
        ...

    async def list_by_institution_and_role(
        self, institution_id: UUID, role: AccountRole
    ) -> list[Account]:
        """List accounts with ``role`` in an institution, oldest first."""
        ...

    async def save(self, account: Account) -> None:
        """Create new account.

        Raises:
            IntegrityError: If the email is already taken (unique constraint).
        """
        ...

    async def update(self, account: Account) -> None:
        """Persist status, verification flags and profile of an account.

        Password fields are not written here; use update_password.
        """
        ...

    async def update_password(
        self,
        account_id: UUID,
        expected_hash: str,
        new_hash: str,
        new_history: list[str],
        clear_first_login: bool,
    ) -> bool:
        """Atomically replace the password if it has not changed meanwhile.

        Executes a single conditional write guarded by
        ``password_hash == expected_hash``. The reuse check the caller ran
        against ``expected_hash`` therefore still holds when the write lands.

        Args:
            account_id: Account to update.
            expected_hash: Hash the caller read before checking reuse.
            new_hash: Hash of the new password.
            new_history: Rotated history (already truncated).
            clear_first_login: Also set is_first_login to False.

        Returns:
            True if the row was updated, False if another write won.
        """
        ...
