"""
Reviews Blueprint

Mounted under ``/posts/<post_id>/reviews``.
"""

from flask import Blueprint

reviews_bp = Blueprint('reviews', __name__)

from blognova.reviews import routes  # noqa: E402, F401
