"""API tests for /api/v1/auth.

Tests cover:
- Public institution listing
- Admin registration, OTP verification, login
- Uniform 401 for unknown identifier and wrong password
- 403 for unverified email
- Refresh, forgot/reset password, resend OTP
- Problem Details error shape
"""

import pytest

from src.application.commands.handlers.request_password_reset_handler import (
    GENERIC_RESET_MESSAGE,
)
from tests.api.conftest import (
    API,
    create_institution,
    last_code,
    register_verified_admin,
)


def register(client, email="grace@mit.edu", password="Cobol1959", code="mit"):
    return client.post(
        f"{API}/auth/admin/register",
        json={
            "institution_code": code,
            "first_name": "Grace",
            "last_name": "Hopper",
            "email": email,
            "password": password,
            "confirm_password": password,
        },
    )


@pytest.mark.integration
class TestInstitutionsAndRegistration:
    """Test public listing and admin registration."""

    def test_public_listing_shows_active_only(self, client):
        create_institution(client, code="MIT")
        create_institution(client, code="OLD", name="Old College")
        client.delete(
            f"{API}/superadmin/institutions/OLD",
            headers={"X-Super-Admin-Key": "test-super-admin-key"},
        )

        response = client.get(f"{API}/auth/institutions")

        assert response.status_code == 200
        assert [i["code"] for i in response.json()["institutions"]] == ["MIT"]

    def test_register_admin(self, client, mailbox):
        create_institution(client)

        response = register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "grace@mit.edu"
        assert body["institution_code"] == "MIT"
        assert mailbox[-1]["to_email"] == "grace@mit.edu"
        assert len(mailbox[-1]["data"]["code"]) == 6

    def test_register_unknown_institution(self, client):
        response = register(client, code="NOPE")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/institution_not_found")

    def test_register_duplicate_email(self, client):
        create_institution(client)
        register(client)

        response = register(client)

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/email_already_exists")

    def test_register_password_mismatch_has_field_error(self, client):
        create_institution(client)

        response = client.post(
            f"{API}/auth/admin/register",
            json={
                "institution_code": "MIT",
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "grace@mit.edu",
                "password": "Cobol1959",
                "confirm_password": "Cobol1960",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["instance"] == f"{API}/auth/admin/register"
        assert body["errors"][0]["field"] == "confirm_password"

    def test_malformed_body_is_422(self, client):
        response = client.post(f"{API}/auth/admin/register", json={"email": "nope"})

        assert response.status_code == 422


@pytest.mark.integration
class TestLogin:
    """Test login outcomes."""

    def test_unverified_admin_gets_403_with_email(self, client):
        create_institution(client)
        register(client)

        response = client.post(
            f"{API}/auth/login",
            json={"identifier": "grace@mit.edu", "password": "Cobol1959", "role": "admin"},
        )

        assert response.status_code == 403
        assert response.json()["details"] == {"email": "grace@mit.edu"}

    def test_verified_admin_logs_in(self, client, mailbox):
        create_institution(client)

        body = register_verified_admin(client, mailbox)

        assert body["token_type"] == "bearer"
        assert body["account"]["role"] == "admin"
        assert body["account"]["institution_name"] == "MIT"
        assert "password_hash" not in body["account"]

    def test_unknown_and_wrong_password_are_identical(self, client, mailbox):
        create_institution(client)
        register_verified_admin(client, mailbox)

        unknown = client.post(
            f"{API}/auth/login",
            json={"identifier": "nobody@mit.edu", "password": "Cobol1959", "role": "admin"},
        )
        wrong = client.post(
            f"{API}/auth/login",
            json={"identifier": "grace@mit.edu", "password": "Cobol1960", "role": "admin"},
        )

        assert unknown.status_code == wrong.status_code == 401
        strip = lambda body: {k: v for k, v in body.items() if k != "trace_id"}  # noqa: E731
        assert strip(unknown.json()) == strip(wrong.json())

    def test_wrong_role_is_invalid_credentials(self, client, mailbox):
        create_institution(client)
        register_verified_admin(client, mailbox)

        response = client.post(
            f"{API}/auth/login",
            json={"identifier": "grace@mit.edu", "password": "Cobol1959", "role": "student"},
        )

        assert response.status_code == 401


@pytest.mark.integration
class TestVerificationAndTokens:
    """Test OTP verification, resend and refresh."""

    def test_otp_is_single_use(self, client, mailbox):
        create_institution(client)
        register(client)
        code = last_code(mailbox, "grace@mit.edu")

        first = client.post(f"{API}/auth/verify-otp", json={"email": "grace@mit.edu", "code": code})
        second = client.post(f"{API}/auth/verify-otp", json={"email": "grace@mit.edu", "code": code})

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json()["type"].endswith("/errors/credential_expired_or_consumed")

    def test_resend_supersedes_previous_code(self, client, mailbox):
        create_institution(client)
        register(client)
        old_code = last_code(mailbox, "grace@mit.edu")

        resend = client.post(f"{API}/auth/resend-otp", json={"email": "grace@mit.edu"})
        new_code = last_code(mailbox, "grace@mit.edu")

        assert resend.status_code == 200
        if old_code != new_code:
            stale = client.post(
                f"{API}/auth/verify-otp", json={"email": "grace@mit.edu", "code": old_code}
            )
            assert stale.status_code == 400
        fresh = client.post(
            f"{API}/auth/verify-otp", json={"email": "grace@mit.edu", "code": new_code}
        )
        assert fresh.status_code == 200

    def test_resend_unknown_email(self, client):
        response = client.post(f"{API}/auth/resend-otp", json={"email": "ghost@mit.edu"})

        assert response.status_code == 404

    def test_refresh_token(self, client, mailbox):
        create_institution(client)
        login = register_verified_admin(client, mailbox)

        response = client.post(
            f"{API}/auth/refresh-token", json={"refresh_token": login["refresh_token"]}
        )

        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_access_token_cannot_refresh(self, client, mailbox):
        create_institution(client)
        login = register_verified_admin(client, mailbox)

        response = client.post(
            f"{API}/auth/refresh-token", json={"refresh_token": login["access_token"]}
        )

        assert response.status_code == 401


@pytest.mark.integration
class TestPasswordReset:
    """Test forgot/reset password."""

    def test_forgot_password_same_answer_for_unknown(self, client, mailbox):
        create_institution(client)
        register_verified_admin(client, mailbox)
        sent_before = len(mailbox)

        known = client.post(
            f"{API}/auth/forgot-password", json={"email": "grace@mit.edu", "role": "admin"}
        )
        unknown = client.post(
            f"{API}/auth/forgot-password", json={"email": "ghost@mit.edu", "role": "admin"}
        )

        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json() == {"message": GENERIC_RESET_MESSAGE}
        assert len(mailbox) == sent_before + 1

    def test_reset_password_then_login(self, client, mailbox):
        create_institution(client)
        register_verified_admin(client, mailbox)
        client.post(
            f"{API}/auth/forgot-password", json={"email": "grace@mit.edu", "role": "admin"}
        )

        reset = client.post(
            f"{API}/auth/reset-password",
            json={
                "email": "grace@mit.edu",
                "code": last_code(mailbox, "grace@mit.edu"),
                "new_password": "Flowmatic-1",
                "confirm_password": "Flowmatic-1",
            },
        )
        login = client.post(
            f"{API}/auth/login",
            json={"identifier": "grace@mit.edu", "password": "Flowmatic-1", "role": "admin"},
        )

        assert reset.status_code == 200
        assert login.status_code == 200

    def test_reset_to_current_password_rejected(self, client, mailbox):
        create_institution(client)
        register_verified_admin(client, mailbox)
        client.post(
            f"{API}/auth/forgot-password", json={"email": "grace@mit.edu", "role": "admin"}
        )

        response = client.post(
            f"{API}/auth/reset-password",
            json={
                "email": "grace@mit.edu",
                "code": last_code(mailbox, "grace@mit.edu"),
                "new_password": "Cobol1959",
                "confirm_password": "Cobol1959",
            },
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/errors/password_same_as_current")
