"""Password policy service.

Wraps the hashing port with the reuse rules: a new password must differ
from the current one and from the last ``history_size`` passwords. Every
password write goes through ``replace_password`` so the reuse check and the
write see the same current hash (compare-and-swap on ``password_hash``).
"""

from src.core.constants import PASSWORD_MAX_BYTES, PASSWORD_MIN_LENGTH
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.errors import (
    PASSWORD_RECENTLY_REUSED,
    PASSWORD_SAME_AS_CURRENT,
    PolicyViolationError,
)
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol

DEFAULT_HISTORY_SIZE = 5


class PasswordPolicyService:
    """Hash, verify, reuse check and history rotation.

    Example:
        >>> policy = PasswordPolicyService(password_service=get_password_service())
        >>> violation = await policy.check_reuse(
        ...     "NewSecret42", account.password_hash, account.password_history
        ... )
    """

    def __init__(
        self,
        password_service: PasswordHashingProtocol,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        self._password_service = password_service
        self._history_size = history_size

    async def hash(self, plaintext: str) -> str:
        """Hash ``plaintext`` with a fresh salt."""
        return await self._password_service.hash_password(plaintext)

    async def verify(self, plaintext: str, password_hash: str) -> bool:
        """Check ``plaintext`` against ``password_hash``. Malformed hashes give False."""
        return await self._password_service.verify_password(plaintext, password_hash)

    async def check_reuse(
        self,
        new_plaintext: str,
        current_hash: str,
        history: list[str] | None,
    ) -> PolicyViolationError | None:
        """Reject the current password and recently used ones.

        Args:
            new_plaintext: Candidate password.
            current_hash: Hash of the password in use.
            history: Prior hashes, most recent first (None means empty).

        Returns:
            PASSWORD_SAME_AS_CURRENT, PASSWORD_RECENTLY_REUSED, or None.
        """
        if await self.verify(new_plaintext, current_hash):
            return PASSWORD_SAME_AS_CURRENT

        for old_hash in (history or [])[: self._history_size]:
            if await self.verify(new_plaintext, old_hash):
                return PASSWORD_RECENTLY_REUSED

        return None

    def rotate(self, history: list[str] | None, outgoing_hash: str) -> list[str]:
        """Prepend the outgoing hash and keep the newest ``history_size``."""
        return rotate_history(history, outgoing_hash, self._history_size)

    async def replace_password(
        self,
        account: Account,
        new_plaintext: str,
        account_repo: AccountRepository,
        *,
        clear_first_login: bool,
    ) -> Result[None, DomainError]:
        """Run the reuse check, then hash, rotate and write atomically.

        Args:
            account: Account as read by the caller.
            new_plaintext: New password (length already validated).
            account_repo: Repository used for the compare-and-swap write.
            clear_first_login: Clear is_first_login in the same write.

        Returns:
            Success(None), Failure(PolicyViolationError) on reuse, or
            Failure(ConflictError) when another write changed the password
            after ``account`` was read.
        """
        violation = await self.check_reuse(
            new_plaintext, account.password_hash, account.password_history
        )
        if violation is not None:
            return Failure(error=violation)

        new_hash = await self.hash(new_plaintext)
        new_history = self.rotate(account.password_history, account.password_hash)

        swapped = await account_repo.update_password(
            account_id=account.id,
            expected_hash=account.password_hash,
            new_hash=new_hash,
            new_history=new_history,
            clear_first_login=clear_first_login,
        )
        if not swapped:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CONCURRENT_UPDATE_CONFLICT,
                    message="Password was changed by another request. Please retry.",
                    resource_type="Account",
                    conflicting_field="password",
                )
            )

        account.password_hash = new_hash
        account.password_history = new_history
        if clear_first_login:
            account.is_first_login = False
        return Success(value=None)


def rotate_history(
    history: list[str] | None, outgoing_hash: str, size: int = DEFAULT_HISTORY_SIZE
) -> list[str]:
    """New history: ``outgoing_hash`` first, then prior entries, at most ``size``."""
    return [outgoing_hash, *(history or [])][:size]


def check_new_password(
    password: str, confirm_password: str, field: str = "password"
) -> ValidationError | None:
    """Validate a newly chosen password and its confirmation.

    Args:
        password: New password.
        confirm_password: Repeated new password.
        field: Name reported for a too-short or too-long password.

    Returns:
        ValidationError on mismatch, a short password, or one over bcrypt's
        72-byte input limit; None otherwise.
    """
    if password != confirm_password:
        return ValidationError(
            code=ErrorCode.PASSWORDS_DO_NOT_MATCH,
            message="Passwords don't match",
            field="confirm_password",
        )
    if len(password) < PASSWORD_MIN_LENGTH:
        return ValidationError(
            code=ErrorCode.PASSWORD_TOO_SHORT,
            message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            field=field,
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return ValidationError(
            code=ErrorCode.PASSWORD_TOO_LONG,
            message=f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
            field=field,
        )
    return None
