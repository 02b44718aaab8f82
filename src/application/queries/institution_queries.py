"""Institution queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListInstitutions:
    """List institutions.

    Attributes:
        active_only: True for the public signup listing, False for the
            super-admin listing of every institution.
    """

    active_only: bool = True
