"""
Tests for password re-confirmation grants
"""
from unittest.mock import patch

import pytest
from django.contrib.sessions.backends.db import SessionStore

from club import reauth
from club.exceptions import ReauthenticationRequired

from .conftest import ADMIN_PASSWORD


@pytest.fixture
def admin_request(rf, club_admin):
    request = rf.post('/')
    request.user = club_admin
    request.session = SessionStore()
    return request


@pytest.mark.django_db
class TestVerifyPassword:

    def test_correct_password(self, admin_request):
        assert reauth.verify_password(admin_request, ADMIN_PASSWORD) is True

    def test_wrong_password_is_logged(self, admin_request):
        with patch('club.reauth.logger') as mock_logger:
            assert reauth.verify_password(admin_request, 'not-my-password') is False

        mock_logger.warning.assert_called_once()

    def test_empty_password(self, admin_request):
        assert reauth.verify_password(admin_request, '') is False
        assert reauth.verify_password(admin_request, None) is False


@pytest.mark.django_db
class TestGrants:

    def test_grant_then_consume(self, admin_request):
        reauth.grant(admin_request, 'edit', 42)

        assert reauth.has_grant(admin_request, 'edit', 42)
        assert not reauth.has_grant(admin_request, 'delete', 42)
        assert not reauth.has_grant(admin_request, 'edit', 43)

        reauth.consume(admin_request, 'edit', 42)
        assert not reauth.has_grant(admin_request, 'edit', 42)

    def test_grant_expires(self, admin_request, settings):
        settings.REAUTH_TTL_SECONDS = 300

        with patch('club.reauth.time.time', return_value=1_000.0):
            reauth.grant(admin_request, 'delete', 7)

        with patch('club.reauth.time.time', return_value=1_300.0):
            assert reauth.has_grant(admin_request, 'delete', 7)

        with patch('club.reauth.time.time', return_value=1_301.0):
            assert not reauth.has_grant(admin_request, 'delete', 7)

    def test_require_raises_without_grant(self, admin_request):
        with pytest.raises(ReauthenticationRequired) as excinfo:
            reauth.require(admin_request, 'delete', 5)

        assert excinfo.value.action == 'delete'
        assert excinfo.value.target == 5

    def test_require_passes_with_grant(self, admin_request):
        reauth.grant(admin_request, 'delete', 5)

        reauth.require(admin_request, 'delete', 5)
