"""InstitutionRepository protocol for institution persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.institution import Institution


class InstitutionRepository(Protocol):
    """Institution repository protocol (port).

    Methods:
        find_by_id: Retrieve institution by ID
        find_by_code: Retrieve institution by (uppercase) code
        list_all: Every institution, newest first
        list_active: Active institutions only, by name
        save: Create new institution
        update: Persist name, domain, status and settings
    """

    async def find_by_id(self, institution_id: UUID) -> Institution | None:
        """Find institution by ID."""
        ...

    async def find_by_code(self, code: str) -> Institution | None:
        """Find institution by code. The code is uppercased before lookup."""
        ...

    async def list_all(self) -> list[Institution]:
        """List every institution, newest first."""
        ...

    async def list_active(self) -> list[Institution]:
        """List active institutions ordered by name."""
        ...

    async def save(self, institution: Institution) -> None:
        """Create new institution.

        Raises:
            IntegrityError: If the code is already taken.
        """
        ...

    async def update(self, institution: Institution) -> None:
        """Persist changes to an existing institution."""
        ...
