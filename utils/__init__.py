"""
Utils Package - Content store, view models, gateway and helper modules
"""

from .content import ContentStore, init_content_store, get_content_store
from .view_models import (
    summarize,
    top_skills,
    group_skills_by_category,
    build_home_view_model,
    ViewModelCache,
    init_view_models,
    get_view_models
)
from .gateway import GatewayError, RestGateway, SqlGateway, create_gateway
from .remote import (
    FetchResult,
    SubmitResult,
    PortfolioRemote,
    build_guestbook_payload,
    init_remote,
    get_remote
)
from .icons import resolve_icon, icon_choices
from .helpers import render_paragraphs, clamp_level, parse_bool, form_bool
from .security import get_client_ip, check_rate_limit
from .notifications import send_telegram_notification, notify_new_guestbook_entry

__all__ = [
    # Content
    'ContentStore',
    'init_content_store',
    'get_content_store',

    # View models
    'summarize',
    'top_skills',
    'group_skills_by_category',
    'build_home_view_model',
    'ViewModelCache',
    'init_view_models',
    'get_view_models',

    # Gateway
    'GatewayError',
    'RestGateway',
    'SqlGateway',
    'create_gateway',

    # Remote data
    'FetchResult',
    'SubmitResult',
    'PortfolioRemote',
    'build_guestbook_payload',
    'init_remote',
    'get_remote',

    # Icons
    'resolve_icon',
    'icon_choices',

    # Helpers
    'render_paragraphs',
    'clamp_level',
    'parse_bool',
    'form_bool',

    # Security
    'get_client_ip',
    'check_rate_limit',

    # Notifications
    'send_telegram_notification',
    'notify_new_guestbook_entry'
]
