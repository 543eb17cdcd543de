"""Flask web surface for the autocorrect engine."""
from .web import app, serve

__all__ = ["app", "serve"]
