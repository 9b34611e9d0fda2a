"""
BlogNova - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from blognova.config import Config, DEFAULT_SESSION_SECRET
from blognova.errors import register_error_handlers
from blognova.extensions import db, login_manager
from blognova.middleware import MethodOverrideMiddleware

logger = logging.getLogger(__name__)


def resolve_log_level(name):
    """Map a level name such as 'DEBUG' to its number; unknown names mean INFO."""
    level = logging.getLevelName(str(name or 'INFO').upper())
    if not isinstance(level, int):
        logger.warning('Unknown LOG_LEVEL %r; using INFO', name)
        return logging.INFO
    return level


def create_app(config_class=Config, verifier=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        verifier: Credential verifier used by the login route
            (default: ``LocalStrategy``)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('blognova').setLevel(resolve_log_level(app.config.get('LOG_LEVEL')))

    if app.config['SECRET_KEY'] == DEFAULT_SESSION_SECRET and not app.testing:
        logger.warning('SESSION_SECRET is not set; using the built-in fallback key')

    # Forms submit PUT/DELETE as POST ?_method=...
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login_form'
    login_manager.login_message = 'You must be logged in to do that'
    login_manager.login_message_category = 'error'

    from blognova.auth.strategy import LocalStrategy, VERIFIER_KEY
    app.extensions[VERIFIER_KEY] = verifier or LocalStrategy()

    # Register blueprints
    from blognova.auth import auth_bp
    from blognova.main import main_bp
    from blognova.posts import posts_bp
    from blognova.reviews import reviews_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(posts_bp, url_prefix='/posts')
    app.register_blueprint(reviews_bp, url_prefix='/posts/<int:post_id>/reviews')

    register_error_handlers(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from blognova.models import User
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()
        logger.debug('Database tables verified')

    logger.info('BlogNova application created')
    return app
