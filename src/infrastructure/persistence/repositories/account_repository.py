"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account, AccountProfile
from src.domain.enums import AccountRole, AccountStatus
from src.infrastructure.persistence.models.account import AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Email lookups are exact matches; emails are stored as entered (trimmed)
    and compared case-sensitively.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_login_identifier(
        ...         "MIT-123456789", AccountRole.STUDENT
        ...     )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by exact email."""
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_by_login_identifier(
        self, identifier: str, role: AccountRole
    ) -> Account | None:
        """Resolve email or role-specific ID to an account of ``role``.

        Args:
            identifier: Email, student ID or lecturer ID.
            role: Role the caller is logging in as.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        match role:
            case AccountRole.STUDENT:
                condition = or_(
                    AccountModel.email == identifier,
                    AccountModel.student_id == identifier,
                )
            case AccountRole.LECTURER:
                condition = or_(
                    AccountModel.email == identifier,
                    AccountModel.lecturer_id == identifier,
                )
            case _:
                condition = AccountModel.email == identifier

        stmt = (
            select(AccountModel)
            .where(condition)
            .where(AccountModel.role == role.value)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: str) -> bool:
        """Check if an account with ``email`` exists."""
        stmt = select(AccountModel.id).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count_by_institution_and_role(
        self, institution_id: UUID, role: AccountRole
    ) -> int:
        """Count accounts with ``role`` in an institution."""
        stmt = (
            select(func.count())
            .select_from(AccountModel)
            .where(AccountModel.institution_id == institution_id)
            .where(AccountModel.role == role.value)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_by_institution_and_role(
        self, institution_id: UUID, role: AccountRole
    ) -> list[Account]:
        """List accounts with ``role`` in an institution, oldest first."""
        stmt = (
            select(AccountModel)
            .where(AccountModel.institution_id == institution_id)
            .where(AccountModel.role == role.value)
            .order_by(AccountModel.created_at, AccountModel.email)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, account: Account) -> None:
        """Create new account in database.

        Args:
            account: Domain Account entity to persist.

        Raises:
            IntegrityError: If email already exists.
        """
        model = self._to_model(account)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        account.created_at = model.created_at
        account.updated_at = model.updated_at

    async def update(self, account: Account) -> None:
        """Update status, verification flags and profile.

        Password columns are left alone; see update_password.

        Raises:
            NoResultFound: If account doesn't exist.
        """
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.status = account.status.value
        model.email_verified = account.email_verified
        model.is_first_login = account.is_first_login
        self._apply_profile(model, account.profile)

        await self.session.commit()
        await self.session.refresh(model)
        account.updated_at = model.updated_at

    async def update_password(
        self,
        account_id: UUID,
        expected_hash: str,
        new_hash: str,
        new_history: list[str],
        clear_first_login: bool,
    ) -> bool:
        """Compare-and-swap password write.

        Args:
            account_id: Account to update.
            expected_hash: Hash read before the reuse check.
            new_hash: Hash of the new password.
            new_history: Rotated history.
            clear_first_login: Also clear is_first_login.

        Returns:
            True if exactly one row changed.
        """
        values: dict[str, object] = {
            "password_hash": new_hash,
            "password_history": new_history,
        }
        if clear_first_login:
            values["is_first_login"] = False

        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .where(AccountModel.password_hash == expected_hash)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        # Bulk UPDATE bypasses the identity map
        self.session.expire_all()
        return result.rowcount == 1

    @staticmethod
    def _apply_profile(model: AccountModel, profile: AccountProfile) -> None:
        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.avatar = profile.avatar
        model.department = profile.department
        model.student_id = profile.student_id
        model.year = profile.year
        model.lecturer_id = profile.lecturer_id
        model.academic_title = profile.academic_title
        model.specialization = profile.specialization
        model.title = profile.title

    def _to_domain(self, model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=AccountRole(model.role),
            institution_id=model.institution_id,
            status=AccountStatus(model.status),
            email_verified=model.email_verified,
            is_first_login=model.is_first_login,
            profile=AccountProfile(
                first_name=model.first_name,
                last_name=model.last_name,
                avatar=model.avatar,
                department=model.department,
                student_id=model.student_id,
                year=model.year,
                lecturer_id=model.lecturer_id,
                academic_title=model.academic_title,
                specialization=model.specialization,
                title=model.title,
            ),
            password_history=list(model.password_history or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, account: Account) -> AccountModel:
        """Convert domain entity to database model."""
        model = AccountModel(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            password_history=list(account.password_history),
            role=account.role.value,
            institution_id=account.institution_id,
            status=account.status.value,
            email_verified=account.email_verified,
            is_first_login=account.is_first_login,
        )
        self._apply_profile(model, account.profile)
        return model
