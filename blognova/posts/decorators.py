"""
Post Decorators

Load the post named in the URL and enforce ownership before the view runs.
"""

from functools import wraps

from flask import redirect, url_for, flash
from flask_login import current_user

from blognova.extensions import db
from blognova.models import Post

POST_NOT_FOUND = 'Post you requested does not exist!'


def load_post(f):
    """Replace the ``post_id`` URL argument with the loaded ``post``.

    A missing post flashes an error and redirects to the listing.
    """
    @wraps(f)
    def wrapper(post_id, *args, **kwargs):
        post = db.session.get(Post, post_id)
        if post is None:
            flash(POST_NOT_FOUND, 'error')
            return redirect(url_for('posts.index'))
        return f(post, *args, **kwargs)
    return wrapper


def author_required(f):
    """Only the post's author may continue. Must be applied under ``load_post``."""
    @wraps(f)
    def wrapper(post, *args, **kwargs):
        if not post.is_owned_by(current_user):
            flash('You are not the author of this post', 'error')
            return redirect(url_for('posts.show', post_id=post.id))
        return f(post, *args, **kwargs)
    return wrapper
