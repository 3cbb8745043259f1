"""
FiveCard Server - FastAPI HTTP layer
"""

from fivecard.server.app import app, create_app

__all__ = ["app", "create_app"]
