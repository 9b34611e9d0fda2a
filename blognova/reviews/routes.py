"""
Reviews Routes
"""

import logging

from flask import request, redirect, url_for, flash
from flask_login import login_required, current_user

from blognova.errors import AppError
from blognova.extensions import db
from blognova.models import Review
from blognova.models.post import MIN_RATING, MAX_RATING
from blognova.posts.decorators import load_post
from blognova.reviews import reviews_bp

logger = logging.getLogger(__name__)


def _review_fields():
    comment = request.form.get('comment', '').strip()
    try:
        rating = int(request.form.get('rating', ''))
    except ValueError:
        rating = None
    if not comment or rating is None or not MIN_RATING <= rating <= MAX_RATING:
        raise AppError(400, f'Review needs a comment and a rating from {MIN_RATING} to {MAX_RATING}')
    return comment, rating


@reviews_bp.route('', methods=['POST'])
@login_required
@load_post
def create(post):
    comment, rating = _review_fields()
    review = Review(comment=comment, rating=rating, post_id=post.id, author_id=current_user.id)
    db.session.add(review)
    db.session.commit()
    logger.info('Review %s added to post %s by %s', review.id, post.id, current_user.username)
    flash('New review created!', 'success')
    return redirect(url_for('posts.show', post_id=post.id))


@reviews_bp.route('/<int:review_id>', methods=['DELETE'])
@login_required
@load_post
def delete(post, review_id):
    review = Review.query.filter_by(id=review_id, post_id=post.id).first()
    if review is None:
        flash('Review does not exist', 'error')
        return redirect(url_for('posts.show', post_id=post.id))
    if review.author_id != current_user.id:
        flash('You are not the author of this review', 'error')
        return redirect(url_for('posts.show', post_id=post.id))

    db.session.delete(review)
    db.session.commit()
    logger.info('Review %s deleted from post %s', review_id, post.id)
    flash('Review deleted', 'success')
    return redirect(url_for('posts.show', post_id=post.id))
