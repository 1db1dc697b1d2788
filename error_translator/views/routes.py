"""Flask Routes (View Layer) — all HTTP endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from error_translator.models.schemas import BatchTranslateRequest, TranslateRequest

logger = logging.getLogger(__name__)


def _validation_error_response(exc: ValidationError):
    details = json.loads(exc.json())
    return (
        jsonify(
            {
                "error": "Invalid request payload",
                "details": details,
            }
        ),
        400,
    )


def create_app(controller: Any = None) -> Flask:
    """Flask application factory."""
    app = Flask(__name__)

    if controller is None:
        from error_translator.controllers.translation_controller import TranslationController

        controller = TranslationController()

    # ── Error handlers ───────────────────────────────
    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({"error": "Not found", "status": 404}), 404

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return jsonify({"error": "Method not allowed", "status": 405}), 405

    @app.errorhandler(Exception)
    def unhandled_error(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description, "status": error.code}), error.code
        logger.exception("Unhandled error while serving %s", request.path)
        payload = controller.translate_value(error)
        return jsonify({"error": payload, "status": 500}), 500

    @app.route("/health")
    def health():
        return jsonify(controller.health().model_dump())

    @app.route("/api/catalog")
    def catalog():
        return jsonify(controller.get_catalog().model_dump())

    @app.route("/api/translate", methods=["POST"])
    def translate():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object body is required"}), 400

        try:
            schema = TranslateRequest.model_validate(data)
        except ValidationError as exc:
            return _validation_error_response(exc)

        result = controller.translate(schema)
        return jsonify(result.model_dump())

    @app.route("/api/translate/batch", methods=["POST"])
    def batch_translate():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object body is required"}), 400

        try:
            schema = BatchTranslateRequest(errors=data.get("errors", []))
        except ValidationError as exc:
            return _validation_error_response(exc)

        result = controller.batch_translate(schema)
        return jsonify(result.model_dump())

    return app
