"""Update Institution Status handler (super-admin).

Also serves DeactivateInstitution, the soft delete: institutions are never
removed, they move to INACTIVE.
"""

from src.application.commands.institution_commands import (
    DeactivateInstitution,
    UpdateInstitutionStatus,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.institution import Institution
from src.domain.enums import InstitutionStatus
from src.domain.errors import institution_not_found
from src.domain.protocols import InstitutionRepository, LoggerProtocol


class UpdateInstitutionStatusHandler:
    """Handler for institution status changes."""

    def __init__(
        self, institution_repo: InstitutionRepository, logger: LoggerProtocol
    ) -> None:
        self._institution_repo = institution_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateInstitutionStatus | DeactivateInstitution
    ) -> Result[Institution, DomainError]:
        """Set the status of the institution with ``cmd.code``.

        Returns:
            Success(Institution) or Failure(NotFoundError) for an unknown code.
        """
        match cmd:
            case DeactivateInstitution():
                status = InstitutionStatus.INACTIVE
            case UpdateInstitutionStatus(status=requested):
                status = requested

        code = cmd.code.strip().upper()
        institution = await self._institution_repo.find_by_code(code)
        if institution is None:
            return Failure(error=institution_not_found(code))

        institution.status = status
        await self._institution_repo.update(institution)

        self._logger.info(
            "institution_status_changed",
            institution_code=institution.code,
            status=status.value,
        )
        return Success(value=institution)
