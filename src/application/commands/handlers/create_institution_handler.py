"""Create Institution handler (super-admin)."""

from uuid_extensions import uuid7

from src.application.commands.institution_commands import CreateInstitution
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.institution import Institution, InstitutionSettings
from src.domain.errors import institution_code_taken
from src.domain.protocols import InstitutionRepository, LoggerProtocol


class CreateInstitutionHandler:
    """Handler for institution creation.

    Codes are unique and stored uppercase; settings start at their defaults.
    """

    def __init__(
        self, institution_repo: InstitutionRepository, logger: LoggerProtocol
    ) -> None:
        self._institution_repo = institution_repo
        self._logger = logger

    async def handle(self, cmd: CreateInstitution) -> Result[Institution, DomainError]:
        """Handle institution creation.

        Returns:
            Success(Institution) or Failure(ValidationError | DuplicateError).
        """
        name = cmd.name.strip()
        code = cmd.code.strip().upper()

        if len(name) < 2:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Institution name must be at least 2 characters",
                    field="name",
                )
            )
        if not 3 <= len(code) <= 20:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Institution code must be 3 to 20 characters",
                    field="code",
                )
            )

        if await self._institution_repo.find_by_code(code) is not None:
            return Failure(error=institution_code_taken())

        institution = Institution(
            id=uuid7(),
            name=name,
            code=code,
            status=cmd.status,
            domain=cmd.domain.strip(),
            settings=InstitutionSettings(),
        )
        await self._institution_repo.save(institution)

        self._logger.info("institution_created", institution_code=institution.code)
        return Success(value=institution)
