"""
API Routes - JSON endpoints
"""

from flask import jsonify, request, current_app
from utils.view_models import get_view_models
from utils.remote import get_remote
from . import api_bp


@api_bp.route('/home')
def home():
    """Home page view model"""
    return jsonify(get_view_models().home())


@api_bp.route('/skills/by-category')
def skills_by_category():
    return jsonify(get_view_models().skills_by_category())


@api_bp.route('/projects')
def projects():
    """Published projects; on store failure the last fetched list plus an error"""
    result = get_remote().fetch_published_projects()
    return jsonify({'projects': result.items, 'error': result.error})


@api_bp.route('/guestbook')
def guestbook():
    default_limit = current_app.config.get('GUESTBOOK_LIMIT', 20)
    limit = request.args.get('limit', default_limit, type=int)
    limit = max(1, min(limit, default_limit))
    result = get_remote().fetch_recent_guestbook_entries(limit=limit)
    return jsonify({'entries': result.items, 'error': result.error})
