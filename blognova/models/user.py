"""
User Model

Identity records for session-based authentication.
"""

from datetime import datetime

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from blognova.errors import RegistrationError
from blognova.extensions import db

# Hash format carries method, salt and iteration metadata alongside the digest
PASSWORD_HASH_METHOD = 'pbkdf2:sha256'


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    posts = db.relationship('Post', backref='author', lazy=True)
    reviews = db.relationship('Review', backref='author', lazy=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method=PASSWORD_HASH_METHOD)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @classmethod
    def register(cls, username, password, email=None):
        """Create and persist a new user with a hashed password.

        Raises:
            RegistrationError: username or password is missing
            sqlalchemy.exc.IntegrityError: username or email already taken
        """
        if not username:
            raise RegistrationError('No username was given')
        if not password:
            raise RegistrationError('No password was given')

        user = cls(username=username, email=email or None)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user

    def __repr__(self):
        return f'<User {self.username}>'
