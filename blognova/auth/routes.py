"""
Auth Routes

User signup, login and logout using Flask-Login.
"""

import logging
from urllib.parse import urlsplit

from flask import render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blognova.auth import auth_bp
from blognova.auth.strategy import AuthStatus, get_verifier, INVALID_CREDENTIALS
from blognova.errors import RegistrationError
from blognova.extensions import db
from blognova.models import User

logger = logging.getLogger(__name__)

USERNAME_TAKEN = 'Username already exists'
EMAIL_TAKEN = 'Email already in use'


def _start_session(user):
    """Attach ``user`` to the session; expiry counts from now."""
    session.permanent = True
    login_user(user)


def _is_safe_redirect(target):
    if not target:
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc and target.startswith('/')


def _duplicate_reason(username, email):
    if User.query.filter_by(username=username).first():
        return USERNAME_TAKEN
    if email and User.query.filter_by(email=email).first():
        return EMAIL_TAKEN
    return None


@auth_bp.route('/signup', methods=['GET'])
def signup_form():
    """Signup form"""
    return render_template('users/signup.html')


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create an account and log it in"""
    username = request.form.get('username', '').strip()
    email = request.form.get('email', '').strip() or None
    password = request.form.get('password', '')

    reason = _duplicate_reason(username, email)
    if reason:
        flash(reason, 'error')
        return redirect(url_for('auth.signup_form'))

    try:
        user = User.register(username, password, email=email)
    except RegistrationError as e:
        flash(e.message, 'error')
        return redirect(url_for('auth.signup_form'))
    except IntegrityError:
        # Another signup claimed the name between the check and the insert
        db.session.rollback()
        flash(_duplicate_reason(username, email) or USERNAME_TAKEN, 'error')
        return redirect(url_for('auth.signup_form'))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Registration error for %r: %s', username, e)
        flash('Could not create your account. Please try again.', 'error')
        return redirect(url_for('auth.signup_form'))

    _start_session(user)
    logger.info('New user registered: %s', user.username)
    flash('Welcome to BlogNova!', 'success')
    return redirect(url_for('posts.index'))


@auth_bp.route('/login', methods=['GET'])
def login_form():
    """Login form"""
    return render_template('users/login.html', next=request.args.get('next', ''))


@auth_bp.route('/login', methods=['POST'])
def login():
    """Authenticate with the installed credential verifier"""
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')

    result = get_verifier()(username, password)

    if result.status is AuthStatus.ERROR:
        # Infrastructure failure, not a credential failure
        raise result.cause

    if result.status is AuthStatus.FAILURE:
        logger.info('Failed login for %r', username)
        flash(INVALID_CREDENTIALS, 'error')
        return redirect(url_for('auth.login_form'))

    _start_session(result.user)
    logger.info('User logged in: %s', result.user.username)
    flash('Welcome back!', 'success')

    next_page = request.form.get('next') or request.args.get('next')
    if _is_safe_redirect(next_page):
        return redirect(next_page)
    return redirect(url_for('posts.index'))


@auth_bp.route('/logout')
def logout():
    """Detach the identity from the session"""
    logout_user()
    flash('You are logged out!', 'success')
    return redirect(url_for('posts.index'))
