"""
Main Blueprint

Home and static information pages.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from blognova.main import routes  # noqa: E402, F401
