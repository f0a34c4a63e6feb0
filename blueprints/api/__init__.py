"""
API Blueprint - JSON views of the home page data, skills, projects and guestbook
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
