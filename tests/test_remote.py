"""
Unit tests for PortfolioRemote: fetches, submission and stale-on-error lists.
"""

from datetime import datetime, timedelta
from unittest.mock import patch

from extensions import db
from models import GuestbookEntry, Project
from utils.gateway import GatewayError, SqlGateway
from utils.remote import (
    GUESTBOOK_ERROR,
    PROJECTS_ERROR,
    REQUIRED_ERROR,
    SUBMIT_ERROR,
    PortfolioRemote,
    build_guestbook_payload,
)


def seed_projects():
    for title, published, order in [('Third', True, 3), ('Draft', False, 1), ('First', True, 1),
                                    ('Old', False, 5), ('Second', True, 2)]:
        db.session.add(Project(title=title, is_published=published, sort_order=order, tech_stack=[]))
    db.session.commit()


def seed_entries(count):
    start = datetime(2026, 1, 1)
    for i in range(count):
        db.session.add(GuestbookEntry(author_name=f'guest-{i}', message='hi',
                                      created_at=start + timedelta(minutes=i)))
    db.session.commit()


class TestFetchPublishedProjects:
    """Published projects, ascending sort_order."""

    def test_returns_only_published_in_order(self, app_context):
        seed_projects()
        remote = PortfolioRemote(SqlGateway())

        result = remote.fetch_published_projects()

        assert result.error is None
        assert [p['title'] for p in result.items] == ['First', 'Second', 'Third']
        assert all(p['is_published'] for p in result.items)

    def test_failure_keeps_previous_list(self, app_context):
        seed_projects()
        gateway = SqlGateway()
        remote = PortfolioRemote(gateway)
        remote.fetch_published_projects()

        with patch.object(gateway, 'execute', side_effect=GatewayError('store down')):
            result = remote.fetch_published_projects()

        assert result.error == PROJECTS_ERROR
        assert [p['title'] for p in result.items] == ['First', 'Second', 'Third']

    def test_first_failure_returns_empty_list(self, app_context):
        gateway = SqlGateway()
        remote = PortfolioRemote(gateway)

        with patch.object(gateway, 'execute', side_effect=GatewayError('store down')):
            result = remote.fetch_published_projects()

        assert result.items == []
        assert result.error == PROJECTS_ERROR


class TestFetchRecentGuestbookEntries:
    """Newest first, capped."""

    def test_newest_first_capped_at_twenty(self, app_context):
        seed_entries(25)
        remote = PortfolioRemote(SqlGateway())

        result = remote.fetch_recent_guestbook_entries()

        assert result.error is None
        assert len(result.items) == 20
        assert result.items[0]['author_name'] == 'guest-24'
        assert result.items[-1]['author_name'] == 'guest-5'

    def test_custom_limit(self, app_context):
        seed_entries(5)
        remote = PortfolioRemote(SqlGateway())

        result = remote.fetch_recent_guestbook_entries(limit=2)

        assert [e['author_name'] for e in result.items] == ['guest-4', 'guest-3']

    def test_failure_keeps_previous_list(self, app_context):
        seed_entries(3)
        gateway = SqlGateway()
        remote = PortfolioRemote(gateway)
        before = remote.fetch_recent_guestbook_entries().items

        with patch.object(gateway, 'execute', side_effect=GatewayError('timeout')):
            result = remote.fetch_recent_guestbook_entries()

        assert result.items == before
        assert result.error == GUESTBOOK_ERROR


class TestSubmitGuestbookEntry:
    """Insert, normalize optional fields, re-fetch."""

    def test_blank_optional_fields_are_stored_as_null(self, app_context):
        remote = PortfolioRemote(SqlGateway())

        result = remote.submit_guestbook_entry({
            'author_name': 'Kim', 'message': 'Nice site!', 'organization': '  ',
            'email': '', 'is_email_public': True,
        })

        assert result.ok
        stored = GuestbookEntry.query.one()
        assert stored.email is None
        assert stored.organization is None
        assert stored.is_email_public is True

    def test_success_refetches_entries(self, app_context):
        seed_entries(2)
        remote = PortfolioRemote(SqlGateway())
        remote.fetch_recent_guestbook_entries()

        result = remote.submit_guestbook_entry({'author_name': 'Lee', 'message': 'Hello',
                                                'organization': 'ACME', 'email': 'lee@example.com'})

        assert result.ok
        assert result.entry['author_name'] == 'Lee'
        assert result.entry['organization'] == 'ACME'
        assert len(remote.guestbook_entries) == 3
        assert any(e['author_name'] == 'Lee' for e in remote.guestbook_entries)

    def test_failure_preserves_form_and_list(self, app_context):
        seed_entries(2)
        gateway = SqlGateway()
        remote = PortfolioRemote(gateway)
        before = remote.fetch_recent_guestbook_entries().items
        form = {'author_name': 'Park', 'message': 'Retry me', 'organization': '', 'email': ''}

        with patch.object(gateway, 'execute', side_effect=GatewayError('insert failed')):
            result = remote.submit_guestbook_entry(form)

        assert not result.ok
        assert result.error == SUBMIT_ERROR
        assert result.form == form
        assert remote.guestbook_entries == before
        assert GuestbookEntry.query.count() == 2

    def test_missing_required_fields_skip_round_trip(self, app_context):
        gateway = SqlGateway()
        remote = PortfolioRemote(gateway)

        with patch.object(gateway, 'execute') as execute:
            result = remote.submit_guestbook_entry({'author_name': ' ', 'message': 'hi'})

        execute.assert_not_called()
        assert result.error == REQUIRED_ERROR
        assert result.form['message'] == 'hi'


class TestBuildGuestbookPayload:
    """Wire payload shape."""

    def test_exact_field_names(self):
        payload = build_guestbook_payload({'author_name': ' Kim ', 'message': ' Hi ',
                                           'organization': 'Uni', 'email': ''})

        assert payload == {
            'author_name': 'Kim',
            'message': 'Hi',
            'organization': 'Uni',
            'email': None,
            'is_email_public': False,
        }

    def test_string_false_keeps_email_private(self):
        payload = build_guestbook_payload({'author_name': 'Kim', 'message': 'Hi',
                                           'email': 'k@example.com', 'is_email_public': 'false'})

        assert payload['is_email_public'] is False

    def test_truthy_strings_make_email_public(self):
        for value in ('on', 'true', 'True', '1', 'yes', True):
            payload = build_guestbook_payload({'author_name': 'Kim', 'message': 'Hi',
                                               'is_email_public': value})
            assert payload['is_email_public'] is True
