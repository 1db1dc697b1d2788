"""Tests for error_translator.models.schemas."""

import pytest

from error_translator.domain.enums import ErrorCategory, Severity
from error_translator.models.catalog import CatalogEntry
from error_translator.models.schemas import (
    BatchTranslateRequest,
    BatchTranslationResponse,
    CatalogResponse,
    HealthResponse,
    NormalizedError,
    TranslateRequest,
    TranslationResponse,
)


class TestNormalizedError:
    def test_defaults(self):
        err = NormalizedError(message="boom", type=ErrorCategory.UNKNOWN, severity=Severity.ERROR)
        assert err.actionable_step is None
        assert err.technical_details is None

    def test_accepts_camel_case(self):
        err = NormalizedError(
            message="boom",
            type="NETWORK",
            severity="error",
            actionableStep="Retry.",
            technicalDetails="trace",
        )
        assert err.type == ErrorCategory.NETWORK
        assert err.actionable_step == "Retry."
        assert err.technical_details == "trace"

    def test_empty_message_raises(self):
        with pytest.raises(Exception):
            NormalizedError(message="  ", type=ErrorCategory.UNKNOWN, severity=Severity.ERROR)

    def test_invalid_category_raises(self):
        with pytest.raises(Exception):
            NormalizedError(message="x", type="TIMEOUT", severity=Severity.ERROR)

    def test_public_dict_hides_details(self):
        err = NormalizedError(
            message="Network connection error.",
            type=ErrorCategory.NETWORK,
            severity=Severity.ERROR,
            actionable_step="Check your internet connection and RPC settings.",
            technical_details="Failed to fetch",
        )
        assert err.to_public_dict() == {
            "message": "Network connection error.",
            "type": "NETWORK",
            "severity": "error",
            "actionableStep": "Check your internet connection and RPC settings.",
        }

    def test_public_dict_with_details(self):
        err = NormalizedError(
            message="x",
            type=ErrorCategory.UNKNOWN,
            severity=Severity.ERROR,
            technical_details="trace",
        )
        data = err.to_public_dict(include_technical_details=True)
        assert data["technicalDetails"] == "trace"
        assert "actionableStep" not in data


class TestRequests:
    def test_translate_request_any_value(self):
        assert TranslateRequest(error=None).error is None
        assert TranslateRequest(error={"message": "x"}).error == {"message": "x"}

    def test_translate_request_requires_error(self):
        with pytest.raises(Exception):
            TranslateRequest.model_validate({})

    def test_batch_request_valid(self):
        req = BatchTranslateRequest(errors=["a", None])
        assert len(req.errors) == 2

    def test_batch_request_empty_raises(self):
        with pytest.raises(Exception):
            BatchTranslateRequest(errors=[])


class TestResponses:
    def test_translation_response_timestamp(self):
        resp = TranslationResponse(result={"message": "x"})
        assert resp.timestamp != ""

    def test_batch_response_dump(self):
        resp = BatchTranslationResponse(results=[{"type": "UNKNOWN"}], total=1, by_category={"UNKNOWN": 1})
        data = resp.model_dump()
        assert data["total"] == 1
        assert data["by_category"] == {"UNKNOWN": 1}

    def test_catalog_response(self):
        resp = CatalogResponse(entries=[CatalogEntry(code="a", message="b")], count=1)
        assert resp.model_dump()["entries"][0] == {"code": "a", "message": "b", "action": None}

    def test_health_response(self):
        resp = HealthResponse(status="healthy", environment="test")
        assert resp.version == "1.0.0"
        assert resp.catalog_size == 0
