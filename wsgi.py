"""
WSGI entry point, e.g. `gunicorn wsgi:application`.

Creates tables and seeds default labels before serving.
"""

from app import app as application, init_db

init_db()
