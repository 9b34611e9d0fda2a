"""
Flask Extensions

Shared extension instances, bound to the application in ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance (credential store, posts and reviews)
db = SQLAlchemy()

# Login manager for session-based user authentication
login_manager = LoginManager()
