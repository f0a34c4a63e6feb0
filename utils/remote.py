"""
Remote Data Module - Fetch/submit calls against the hosted store
Wraps the gateway behind the three operations the pages need.

A failed fetch never clears what was shown before: each call returns the
last successfully fetched list together with the error message.
"""

from collections import namedtuple
from flask import current_app
from .gateway import GatewayError
from .helpers import parse_bool

PROJECTS_TABLE = 'projects'
GUESTBOOK_TABLE = 'guestbook_entries'
DEFAULT_GUESTBOOK_LIMIT = 20

PROJECTS_ERROR = '프로젝트를 불러오지 못했습니다. 잠시 후 다시 시도해 주세요.'
GUESTBOOK_ERROR = '방명록을 불러오지 못했습니다. 잠시 후 다시 시도해 주세요.'
SUBMIT_ERROR = '방명록 등록에 실패했습니다. 입력하신 내용은 그대로 남아 있습니다.'
REQUIRED_ERROR = '이름과 메시지를 입력해 주세요.'

FetchResult = namedtuple('FetchResult', ['items', 'error'])
SubmitResult = namedtuple('SubmitResult', ['ok', 'error', 'entry', 'form'])


def normalize_optional(value):
    """Blank optional fields are stored as NULL, never as ''"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def build_guestbook_payload(entry):
    """Build the insert payload with the field names the store expects"""
    return {
        'author_name': str(entry.get('author_name') or '').strip(),
        'message': str(entry.get('message') or '').strip(),
        'organization': normalize_optional(entry.get('organization')),
        'email': normalize_optional(entry.get('email')),
        'is_email_public': parse_bool(entry.get('is_email_public')),
    }


class PortfolioRemote:
    """Projects and guestbook access with stale-on-error lists"""

    def __init__(self, gateway):
        self.gateway = gateway
        self.projects = []
        self.guestbook_entries = []

    def fetch_published_projects(self):
        """
        Published projects ordered by sort_order ascending

        Returns:
            FetchResult: fresh list on success, previous list and a message on failure
        """
        try:
            rows = (
                self.gateway.table(PROJECTS_TABLE)
                .select('*')
                .eq('is_published', True)
                .order('sort_order', ascending=True)
                .execute()
            )
        except GatewayError as e:
            current_app.logger.error(f"Fetching projects failed: {str(e)}")
            return FetchResult(list(self.projects), PROJECTS_ERROR)

        self.projects = rows
        return FetchResult(list(rows), None)

    def fetch_recent_guestbook_entries(self, limit=DEFAULT_GUESTBOOK_LIMIT):
        """Most recent guestbook entries, newest first, capped at ``limit``"""
        try:
            rows = (
                self.gateway.table(GUESTBOOK_TABLE)
                .select('*')
                .order('created_at', ascending=False)
                .limit(limit)
                .execute()
            )
        except GatewayError as e:
            current_app.logger.error(f"Fetching guestbook entries failed: {str(e)}")
            return FetchResult(list(self.guestbook_entries), GUESTBOOK_ERROR)

        self.guestbook_entries = rows
        return FetchResult(list(rows), None)

    def submit_guestbook_entry(self, entry, limit=DEFAULT_GUESTBOOK_LIMIT):
        """
        Insert one guestbook entry, then re-fetch the recent entries

        The list is only refreshed from the store after the insert is
        confirmed; on failure the caller's form data is handed back as-is.

        Args:
            entry (dict): author_name, message, organization, email, is_email_public
            limit (int): size of the re-fetched list

        Returns:
            SubmitResult: ok flag, error message, stored entry and original form data
        """
        payload = build_guestbook_payload(entry)
        if not payload['author_name'] or not payload['message']:
            return SubmitResult(False, REQUIRED_ERROR, None, dict(entry))

        try:
            inserted = self.gateway.table(GUESTBOOK_TABLE).insert([payload]).execute()
        except GatewayError as e:
            current_app.logger.error(f"Guestbook submission failed: {str(e)}")
            return SubmitResult(False, SUBMIT_ERROR, None, dict(entry))

        stored = inserted[0] if inserted else payload
        current_app.logger.info(f"Guestbook entry saved, id: {stored.get('id')}")
        self.fetch_recent_guestbook_entries(limit=limit)
        return SubmitResult(True, None, stored, {})


EXTENSION_KEY = 'portfolio_remote'


def init_remote(app, gateway):
    remote = PortfolioRemote(gateway)
    app.extensions[EXTENSION_KEY] = remote
    return remote


def get_remote():
    """Return the PortfolioRemote owned by the current app"""
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'FetchResult',
    'SubmitResult',
    'PortfolioRemote',
    'build_guestbook_payload',
    'normalize_optional',
    'init_remote',
    'get_remote',
]
