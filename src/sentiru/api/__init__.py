"""HTTP surface for the sentiment analyzer."""

from .app import create_app

__all__ = ["create_app"]
