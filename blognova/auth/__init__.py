"""
Auth Blueprint

Signup, login and logout for session-based user authentication.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blognova.auth import routes  # noqa: E402, F401
