"""Logout handler.

Session tokens are stateless and not tracked server-side, so logout only
records the event. Issued tokens stay valid until they expire; clients
discard them.
"""

from src.application.commands.auth_commands import Logout
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol


class LogoutHandler:
    """Handler for client-side logout."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, cmd: Logout) -> Result[None, None]:
        """Log the logout and succeed."""
        self._logger.info("logout", account_id=str(cmd.account_id))
        return Success(value=None)
