"""ListInstitutions query handler."""

from src.application.queries.institution_queries import ListInstitutions
from src.core.result import Result, Success
from src.domain.entities.institution import Institution
from src.domain.protocols import InstitutionRepository


class ListInstitutionsHandler:
    """List all institutions (super-admin) or active ones (public signup)."""

    def __init__(self, institution_repo: InstitutionRepository) -> None:
        self._institution_repo = institution_repo

    async def handle(self, query: ListInstitutions) -> Result[list[Institution], None]:
        """Handle listing query."""
        if query.active_only:
            return Success(value=await self._institution_repo.list_active())
        return Success(value=await self._institution_repo.list_all())
