"""
Unit tests for the guestbook rate limiter and owner credentials.
"""

from unittest.mock import patch

from utils.security import (
    RATE_LIMIT_REQUESTS,
    check_rate_limit,
    get_admin_credentials,
    verify_password,
)


def request_from(app, ip):
    return app.test_request_context('/guestbook', method='POST', environ_base={'REMOTE_ADDR': ip})


class TestRateLimit:
    """Per-IP request windows."""

    def test_limit_is_per_ip(self, app):
        limit = app.config['GUESTBOOK_RATE_LIMIT']
        with request_from(app, '10.0.0.1'):
            results = [check_rate_limit() for _ in range(limit + 1)]
        with request_from(app, '10.0.0.2'):
            other = check_rate_limit()

        assert results == [True] * limit + [False]
        assert other is True

    def test_idle_ips_are_forgotten(self, app):
        window = app.config['GUESTBOOK_RATE_WINDOW']
        with patch('utils.security.time.time', return_value=1000.0):
            with request_from(app, '10.0.0.1'):
                check_rate_limit()
        assert '10.0.0.1' in RATE_LIMIT_REQUESTS

        with patch('utils.security.time.time', return_value=1000.0 + window + 1):
            with request_from(app, '10.0.0.2'):
                check_rate_limit()

        assert list(RATE_LIMIT_REQUESTS) == ['10.0.0.2']


class TestAdminCredentials:
    """Owner login credentials come from config."""

    def test_configured_credentials_verify(self, app_context):
        credentials = get_admin_credentials()

        assert credentials['username'] == 'owner'
        assert verify_password('owner-password', credentials['password_hash'])
        assert not verify_password('wrong', credentials['password_hash'])

    def test_missing_credentials_disable_login(self, app_context):
        app_context.config['ADMIN_PASSWORD'] = None

        assert get_admin_credentials() == {'username': None, 'password_hash': None}
