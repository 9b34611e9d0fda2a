"""
Post and Review Models
"""

from datetime import datetime

from blognova.extensions import db

MIN_RATING = 1
MAX_RATING = 5


class Post(db.Model):
    """A blog post owned by its author"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(500))
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    reviews = db.relationship('Review', backref='post', lazy=True,
                              cascade='all, delete-orphan',
                              order_by='Review.created_at')

    def is_owned_by(self, user):
        return user.is_authenticated and user.id == self.author_id

    def __repr__(self):
        return f'<Post {self.id} {self.title!r}>'


class Review(db.Model):
    """A rated comment left on a post"""
    __tablename__ = 'reviews'

    id = db.Column(db.Integer, primary_key=True)
    comment = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=False)
    post_id = db.Column(db.Integer, db.ForeignKey('posts.id'), nullable=False, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Review Post:{self.post_id} Rating:{self.rating}>'
