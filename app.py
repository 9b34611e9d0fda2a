"""
BlogNova
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the blognova package.

Environment: SESSION_SECRET, DATABASE_URL (the storage connection string;
MONGO_URL is not read), LOG_LEVEL, PORT (default 8000).
"""

import logging
import os

from blognova import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get('PORT', 8000))
    logging.getLogger(__name__).info('Listening on PORT %s', port)
    app.run(host='0.0.0.0', port=port)
