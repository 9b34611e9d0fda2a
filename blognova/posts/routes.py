"""
Posts Routes

Listing, reading and author-only editing of posts.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user

from blognova.errors import AppError
from blognova.extensions import db
from blognova.models import Post
from blognova.posts import posts_bp
from blognova.posts.decorators import load_post, author_required

logger = logging.getLogger(__name__)


def _post_fields():
    """Read and validate the post form fields."""
    title = request.form.get('title', '').strip()
    content = request.form.get('content', '').strip()
    image_url = request.form.get('image_url', '').strip() or None
    if not title or not content:
        raise AppError(400, 'Send valid data for post')
    return title, content, image_url


@posts_bp.route('', methods=['GET'])
def index():
    """All posts, newest first"""
    posts = Post.query.order_by(Post.created_at.desc(), Post.id.desc()).all()
    return render_template('posts/index.html', posts=posts)


@posts_bp.route('/new', methods=['GET'])
@login_required
def new():
    return render_template('posts/new.html')


@posts_bp.route('', methods=['POST'])
@login_required
def create():
    title, content, image_url = _post_fields()
    post = Post(title=title, content=content, image_url=image_url, author_id=current_user.id)
    db.session.add(post)
    db.session.commit()
    logger.info('Post %s created by %s', post.id, current_user.username)
    flash('New post created!', 'success')
    return redirect(url_for('posts.show', post_id=post.id))


@posts_bp.route('/<int:post_id>', methods=['GET'])
@load_post
def show(post):
    return render_template('posts/show.html', post=post)


@posts_bp.route('/<int:post_id>/edit', methods=['GET'])
@login_required
@load_post
@author_required
def edit(post):
    return render_template('posts/edit.html', post=post)


@posts_bp.route('/<int:post_id>', methods=['PUT', 'PATCH'])
@login_required
@load_post
@author_required
def update(post):
    post.title, post.content, post.image_url = _post_fields()
    db.session.commit()
    logger.info('Post %s updated by %s', post.id, current_user.username)
    flash('Post updated!', 'success')
    return redirect(url_for('posts.show', post_id=post.id))


@posts_bp.route('/<int:post_id>', methods=['DELETE'])
@login_required
@load_post
@author_required
def delete(post):
    db.session.delete(post)
    db.session.commit()
    logger.info('Post %s deleted by %s', post.id, current_user.username)
    flash('Post deleted!', 'success')
    return redirect(url_for('posts.index'))
