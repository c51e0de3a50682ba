"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 --threads 4 -b 0.0.0.0:8080 wsgi:app
"""

from catalog import create_app

app = create_app()
