"""
Method Override Middleware

HTML forms can only submit GET and POST. A POST carrying ``_method`` in its
query string (``/posts/3?_method=DELETE``) is dispatched with that method.
"""

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """WSGI middleware rewriting ``REQUEST_METHOD`` from the ``_method`` query key."""

    def __init__(self, wsgi_app, key='_method'):
        self.wsgi_app = wsgi_app
        self.key = key

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            values = query.get(self.key)
            if values:
                method = values[0].upper()
                if method in OVERRIDABLE_METHODS:
                    environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)
