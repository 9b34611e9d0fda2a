import pytest

from blognova import create_app
from blognova.config import TestConfig
from blognova.errors import AppError
from blognova.extensions import db
from blognova.models import User, Post


class Forbidden(Exception):
    status_code = 403
    message = 'You may not do that'


@pytest.fixture()
def app():
    app = create_app(TestConfig)

    @app.route('/boom/app-error')
    def raise_app_error():
        raise AppError(418, 'Teapot says no')

    @app.route('/boom/forbidden')
    def raise_forbidden():
        raise Forbidden()

    @app.route('/boom/unexpected')
    def raise_unexpected():
        raise RuntimeError('connection string postgres://secret leaked')

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Create a user directly in the database and return its id."""
    def _make(username='alice', password='secret123', email=None):
        with app.app_context():
            user = User.register(username, password, email=email)
            return user.id
    return _make


@pytest.fixture()
def login(client):
    def _login(username='alice', password='secret123', **kwargs):
        return client.post('/login', data={'username': username, 'password': password}, **kwargs)
    return _login


@pytest.fixture()
def make_post(app):
    def _make(author_id, title='First post', content='Hello world'):
        with app.app_context():
            post = Post(title=title, content=content, author_id=author_id)
            db.session.add(post)
            db.session.commit()
            return post.id
    return _make


def count_users(app):
    with app.app_context():
        return User.query.count()
