"""
Pages Routes - Public pages
"""

from flask import render_template, session, current_app
from utils.view_models import get_view_models
from utils.remote import get_remote
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - hero, about me, skills, projects and guestbook sections"""
    home = get_view_models().home()
    remote = get_remote()

    projects = remote.fetch_published_projects()
    entries = remote.fetch_recent_guestbook_entries(
        limit=current_app.config.get('GUESTBOOK_LIMIT', 20))

    # Form data kept from a failed guestbook submission
    guestbook_form = session.pop('guestbook_form', {})

    return render_template('home.html',
                           home=home,
                           projects=projects.items[:current_app.config.get('HOME_PROJECTS_COUNT', 3)],
                           projects_error=projects.error,
                           entries=entries.items,
                           guestbook_error=entries.error,
                           guestbook_form=guestbook_form)


@pages_bp.route('/projects')
def projects():
    """Projects listing page"""
    result = get_remote().fetch_published_projects()
    return render_template('projects.html',
                           projects=result.items,
                           projects_error=result.error)
