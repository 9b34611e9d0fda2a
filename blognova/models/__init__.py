"""
Models Package

Exports all models for easy importing.
"""

from blognova.models.user import User
from blognova.models.post import Post, Review

__all__ = ['User', 'Post', 'Review']
