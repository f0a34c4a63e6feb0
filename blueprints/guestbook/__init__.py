"""
Guestbook Blueprint - Contact section form submission
"""

from flask import Blueprint

guestbook_bp = Blueprint('guestbook', __name__, url_prefix='')

from . import routes
