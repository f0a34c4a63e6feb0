"""
Extensions Module - Centralized initialization of Flask extensions
Keeps extensions unbound so blueprints and utilities can import them
without circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Initialize extensions without binding to app
db = SQLAlchemy()

__all__ = ['db']
