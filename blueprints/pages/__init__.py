"""
Pages Blueprint - Public pages
Handles: Home page sections, projects listing
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
