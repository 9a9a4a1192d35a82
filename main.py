"""ASGI entry point.

Run locally with:

    hypercorn main:app --reload --bind 0.0.0.0:8000
"""

from server.app import app

__all__ = ["app"]
