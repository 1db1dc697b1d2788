"""Controllers package."""

from error_translator.controllers.translation_controller import TranslationController

__all__ = ["TranslationController"]
