"""Pytest configuration.

This configuration ensures:
1. Required settings are present before any ``src`` module is imported
2. Async tests are marked automatically
3. Integration tests get a fresh SQLite database per test
4. Time-dependent code can run against a fixed clock
"""

import inspect
import os
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path

# Settings are read at import time of src.core.config
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret-0123456789abcdef0123")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret-0123456789abcdef012")
os.environ.setdefault("SUPER_ADMIN_KEY", "test-super-admin-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.mkdtemp()) / 'campus_id_test.db'}",
)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.account import Account, AccountProfile  # noqa: E402
from src.domain.entities.institution import Institution  # noqa: E402
from src.domain.enums import (  # noqa: E402
    AccountRole,
    AccountStatus,
    CredentialKind,
    InstitutionStatus,
)
from src.infrastructure.persistence.database import Database  # noqa: E402

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


class FakePasswordService:
    """Deterministic stand-in for bcrypt: ``hash(p) == "hashed:" + p``."""

    async def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class SequentialCodeGenerator:
    """Code generator whose codes never repeat: 000001, 000002, ...

    Magic-link tokens use the same counter, padded to 32 alphanumerics.
    """

    def __init__(self) -> None:
        self.issued = 0

    def generate(self, kind: CredentialKind) -> str:
        self.issued += 1
        if kind == CredentialKind.MAGIC_LINK:
            return f"link{self.issued:028d}"
        return f"{self.issued:06d}"


@pytest.fixture
def clock() -> FixedClock:
    """Fixed clock starting at FIXED_NOW."""
    return FixedClock()


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database with all tables (one per test)."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Session on the per-test database."""
    async with test_database.get_session() as session:
        yield session


def make_institution(
    code: str = "MIT",
    name: str = "Massachusetts Institute of Technology",
    status: InstitutionStatus = InstitutionStatus.ACTIVE,
) -> Institution:
    """Build an Institution entity for tests."""
    return Institution(id=uuid7(), name=name, code=code, status=status)


def make_account(
    institution_id=None,
    email: str = "ada@mit.edu",
    password_hash: str = "hashed_password",
    role: AccountRole = AccountRole.STUDENT,
    status: AccountStatus = AccountStatus.ACTIVE,
    email_verified: bool = True,
    is_first_login: bool = False,
    password_history: list[str] | None = None,
    **profile_fields,
) -> Account:
    """Build an Account entity for tests."""
    profile = AccountProfile(
        first_name=profile_fields.pop("first_name", "Ada"),
        last_name=profile_fields.pop("last_name", "Lovelace"),
        **profile_fields,
    )
    return Account(
        id=uuid7(),
        email=email,
        password_hash=password_hash,
        role=role,
        institution_id=institution_id or uuid7(),
        status=status,
        email_verified=email_verified,
        is_first_login=is_first_login,
        profile=profile,
        password_history=list(password_history or []),
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with SQLite, real crypto, or HTTP"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
