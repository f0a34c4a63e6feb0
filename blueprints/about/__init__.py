"""
About Blueprint - About Me page and its editing forms
Handles: Profile, narrative sections, skills
"""

from flask import Blueprint

about_bp = Blueprint('about', __name__, url_prefix='/about')

from . import routes
