"""InstitutionRepository - SQLAlchemy implementation of InstitutionRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Institution entities and database InstitutionModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.institution import Institution, InstitutionSettings
from src.domain.enums import InstitutionStatus
from src.infrastructure.persistence.models.institution import InstitutionModel


class InstitutionRepository:
    """SQLAlchemy implementation of InstitutionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, institution_id: UUID) -> Institution | None:
        """Find institution by ID."""
        stmt = select(InstitutionModel).where(InstitutionModel.id == institution_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_by_code(self, code: str) -> Institution | None:
        """Find institution by code (normalized to uppercase)."""
        stmt = select(InstitutionModel).where(
            InstitutionModel.code == code.strip().upper()
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[Institution]:
        """List every institution regardless of status, ordered by name."""
        stmt = select(InstitutionModel).order_by(InstitutionModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_active(self) -> list[Institution]:
        """List active institutions, ordered by name."""
        stmt = (
            select(InstitutionModel)
            .where(InstitutionModel.status == InstitutionStatus.ACTIVE.value)
            .order_by(InstitutionModel.name)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, institution: Institution) -> None:
        """Create new institution.

        Raises:
            IntegrityError: If the code is already taken.
        """
        model = self._to_model(institution)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        institution.created_at = model.created_at
        institution.updated_at = model.updated_at

    async def update(self, institution: Institution) -> None:
        """Persist name, domain, status and settings.

        Raises:
            NoResultFound: If institution doesn't exist.
        """
        stmt = select(InstitutionModel).where(InstitutionModel.id == institution.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.name = institution.name
        model.domain = institution.domain
        model.status = institution.status.value
        model.settings = self._settings_to_dict(institution.settings)

        await self.session.commit()
        await self.session.refresh(model)
        institution.updated_at = model.updated_at

    @staticmethod
    def _settings_to_dict(settings: InstitutionSettings) -> dict[str, bool]:
        return {
            "allow_student_self_registration": settings.allow_student_self_registration,
            "require_email_verification": settings.require_email_verification,
        }

    def _to_domain(self, model: InstitutionModel) -> Institution:
        """Convert database model to domain entity."""
        stored = model.settings or {}
        return Institution(
            id=model.id,
            name=model.name,
            code=model.code,
            status=InstitutionStatus(model.status),
            domain=model.domain or "",
            settings=InstitutionSettings(
                allow_student_self_registration=bool(
                    stored.get("allow_student_self_registration", False)
                ),
                require_email_verification=bool(
                    stored.get("require_email_verification", True)
                ),
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, institution: Institution) -> InstitutionModel:
        """Convert domain entity to database model."""
        return InstitutionModel(
            id=institution.id,
            name=institution.name,
            code=institution.code,
            domain=institution.domain,
            status=institution.status.value,
            settings=self._settings_to_dict(institution.settings),
        )
