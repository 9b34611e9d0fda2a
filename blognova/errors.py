"""
Error Funnel

Application error types and the terminal handlers that turn any raised
condition into a rendered error page with an HTTP status.
"""

import logging

from flask import render_template
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
DEFAULT_MESSAGE = 'Something Went Wrong'
NOT_FOUND_MESSAGE = 'Page Not Found'


class AppError(Exception):
    """An error carrying the HTTP status and the short message shown to the user."""

    def __init__(self, status_code=DEFAULT_STATUS, message=DEFAULT_MESSAGE):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self):
        return f'<AppError {self.status_code}: {self.message}>'


class RegistrationError(AppError):
    """Raised by the registration primitive when required fields are missing."""

    def __init__(self, message):
        super().__init__(400, message)


def render_error(status_code, message):
    return render_template('error.html', message=message, status_code=status_code), status_code


def register_error_handlers(app):
    """Install the Error Funnel on ``app``."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        if err.code == 404:
            message = NOT_FOUND_MESSAGE
        else:
            message = err.name
        logger.warning('%s %s: %s', err.code, err.name, err.description)
        return render_error(err.code, message)

    @app.errorhandler(Exception)
    def handle_exception(err):
        status_code = getattr(err, 'status_code', None) or DEFAULT_STATUS
        # Only an explicit message attribute is shown; str(err) never reaches the page
        message = getattr(err, 'message', None) or DEFAULT_MESSAGE

        if status_code >= 500:
            logger.error('Unhandled error: %r', err, exc_info=err)
        else:
            logger.warning('Request failed with %s: %s', status_code, message)
        return render_error(status_code, message)
