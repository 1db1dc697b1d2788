"""Views package — Flask HTTP layer."""

from error_translator.views.routes import create_app

__all__ = ["create_app"]
