"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration,
extensions, the content store and the gateway client. All route handling
is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, session
from config import get_config
from extensions import db
from utils.content import init_content_store
from utils.view_models import init_view_models
from utils.gateway import create_gateway
from utils.remote import init_remote
from utils.helpers import render_paragraphs
from utils.icons import resolve_icon

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.about import about_bp
from blueprints.guestbook import guestbook_bp
from blueprints.api import api_bp
from blueprints.auth import auth_bp


def create_app(config_name=None, content_store=None, gateway=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        content_store (ContentStore): Store to use instead of the seeded one (optional)
        gateway (Gateway): Gateway backend to use instead of GATEWAY_BACKEND (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Keep category/section order in JSON responses
    app.json.sort_keys = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Application state owned by this app instance
    store = init_content_store(app, content_store)
    init_view_models(app, store)
    init_remote(app, gateway or create_gateway(app.config))
    app.logger.info(f"✓ Gateway backend: {app.extensions['portfolio_remote'].gateway.name}")

    # Register Jinja filters and globals
    app.jinja_env.filters['render_paragraphs'] = render_paragraphs
    app.jinja_env.globals['resolve_icon'] = resolve_icon

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Tables back the 'sql' gateway backend
    if app.config.get('GATEWAY_BACKEND') != 'sql':
        return

    with app.app_context():
        try:
            from sqlalchemy import text
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(about_bp)
    app.register_blueprint(guestbook_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(auth_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if request.path.startswith('/api/'):
            return {'error': 'Not found'}, 404
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if request.path.startswith('/api/'):
            return {'error': 'Internal server error'}, 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        from utils.content import get_content_store
        basic_info = get_content_store().basic_info
        return {
            'site_owner': basic_info.get('name', ''),
            'current_year': datetime.now().year,
            'is_owner': 'owner_logged_in' in session,
            'nav_links': [
                ('pages.index', 'Home'),
                ('about.index', 'About Me'),
                ('pages.projects', 'Projects'),
            ],
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
