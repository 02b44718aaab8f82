"""Integration tests for AccountRepository against SQLite.

Tests cover:
- Save/load round trip including profile and password history
- Login identifier resolution per role
- Compare-and-swap password update
- Institution-scoped listing and counting
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from src.domain.enums import AccountRole, AccountStatus
from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.institution_repository import (
    InstitutionRepository,
)
from tests.conftest import make_account, make_institution


@pytest_asyncio.fixture
async def institution(db_session):
    institution = make_institution()
    await InstitutionRepository(session=db_session).save(institution)
    return institution


@pytest.fixture
def repo(db_session) -> AccountRepository:
    return AccountRepository(session=db_session)


@pytest.mark.integration
class TestAccountPersistence:
    """Test basic persistence."""

    async def test_round_trip(self, repo, institution):
        account = make_account(
            institution_id=institution.id,
            student_id="MIT-413000001",
            department="Mathematics",
            year="1",
            password_history=["h1", "h2"],
        )

        await repo.save(account)
        found = await repo.find_by_id(account.id)

        assert found is not None
        assert found.email == "ada@mit.edu"
        assert found.role == AccountRole.STUDENT
        assert found.profile.student_id == "MIT-413000001"
        assert found.profile.department == "Mathematics"
        assert found.password_history == ["h1", "h2"]
        assert found.created_at is not None

    async def test_email_is_unique(self, repo, db_session, institution):
        await repo.save(make_account(institution_id=institution.id))

        with pytest.raises(IntegrityError):
            await repo.save(make_account(institution_id=institution.id))
        await db_session.rollback()

    async def test_email_lookup_is_case_sensitive(self, repo, institution):
        await repo.save(make_account(institution_id=institution.id))

        assert await repo.exists_by_email("ada@mit.edu") is True
        assert await repo.exists_by_email("Ada@mit.edu") is False
        assert await repo.find_by_email("ADA@MIT.EDU") is None

    async def test_update_status(self, repo, institution):
        account = make_account(
            institution_id=institution.id,
            status=AccountStatus.PENDING,
            email_verified=False,
        )
        await repo.save(account)

        account.verify_email()
        await repo.update(account)

        found = await repo.find_by_id(account.id)
        assert found.status == AccountStatus.ACTIVE
        assert found.email_verified is True


@pytest.mark.integration
class TestLoginIdentifier:
    """Test identifier resolution."""

    async def test_student_by_email_or_student_id(self, repo, institution):
        account = make_account(institution_id=institution.id, student_id="MIT-413000001")
        await repo.save(account)

        by_email = await repo.find_by_login_identifier("ada@mit.edu", AccountRole.STUDENT)
        by_id = await repo.find_by_login_identifier("MIT-413000001", AccountRole.STUDENT)

        assert by_email.id == by_id.id == account.id

    async def test_role_must_match(self, repo, institution):
        await repo.save(make_account(institution_id=institution.id))

        assert (
            await repo.find_by_login_identifier("ada@mit.edu", AccountRole.LECTURER)
        ) is None

    async def test_lecturer_id(self, repo, institution):
        lecturer = make_account(
            institution_id=institution.id,
            email="alan@mit.edu",
            role=AccountRole.LECTURER,
            lecturer_id="MIT-LEC-413000001",
        )
        await repo.save(lecturer)

        found = await repo.find_by_login_identifier(
            "MIT-LEC-413000001", AccountRole.LECTURER
        )

        assert found.id == lecturer.id

    async def test_admin_only_by_email(self, repo, institution):
        admin = make_account(
            institution_id=institution.id, email="grace@mit.edu", role=AccountRole.ADMIN
        )
        await repo.save(admin)

        found = await repo.find_by_login_identifier("grace@mit.edu", AccountRole.ADMIN)

        assert found.id == admin.id


@pytest.mark.integration
class TestUpdatePassword:
    """Test compare-and-swap password writes."""

    async def test_swap_when_hash_matches(self, repo, institution):
        account = make_account(
            institution_id=institution.id, password_hash="old", is_first_login=True
        )
        await repo.save(account)

        swapped = await repo.update_password(
            account_id=account.id,
            expected_hash="old",
            new_hash="new",
            new_history=["old"],
            clear_first_login=True,
        )

        found = await repo.find_by_id(account.id)
        assert swapped is True
        assert found.password_hash == "new"
        assert found.password_history == ["old"]
        assert found.is_first_login is False

    async def test_stale_hash_does_not_swap(self, repo, institution):
        account = make_account(institution_id=institution.id, password_hash="current")
        await repo.save(account)

        swapped = await repo.update_password(
            account_id=account.id,
            expected_hash="stale",
            new_hash="new",
            new_history=["stale"],
            clear_first_login=False,
        )

        found = await repo.find_by_id(account.id)
        assert swapped is False
        assert found.password_hash == "current"

    async def test_first_login_kept_unless_cleared(self, repo, institution):
        account = make_account(
            institution_id=institution.id, password_hash="old", is_first_login=True
        )
        await repo.save(account)

        await repo.update_password(
            account_id=account.id,
            expected_hash="old",
            new_hash="new",
            new_history=["old"],
            clear_first_login=False,
        )

        assert (await repo.find_by_id(account.id)).is_first_login is True


@pytest.mark.integration
class TestInstitutionScoping:
    """Test per-institution queries."""

    async def test_list_and_count_by_role(self, repo, db_session, institution):
        other = make_institution(code="HARV", name="Harvard")
        await InstitutionRepository(session=db_session).save(other)
        await repo.save(make_account(institution_id=institution.id, email="s1@mit.edu"))
        await repo.save(make_account(institution_id=institution.id, email="s2@mit.edu"))
        await repo.save(
            make_account(
                institution_id=institution.id, email="a@mit.edu", role=AccountRole.ADMIN
            )
        )
        await repo.save(make_account(institution_id=other.id, email="s@harvard.edu"))

        students = await repo.list_by_institution_and_role(
            institution.id, AccountRole.STUDENT
        )

        assert sorted(a.email for a in students) == ["s1@mit.edu", "s2@mit.edu"]
        assert (
            await repo.count_by_institution_and_role(institution.id, AccountRole.ADMIN)
        ) == 1
