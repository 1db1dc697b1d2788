"""WSGI entrypoint for Gunicorn."""

from config import get_settings
from error_translator.controllers.translation_controller import TranslationController
from error_translator.views.routes import create_app

settings = get_settings()
controller = TranslationController(settings)
app = create_app(controller)
