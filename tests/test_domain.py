"""Tests for error_translator.domain errors and signal tagging."""

from types import SimpleNamespace

from error_translator.domain.errors import CatalogError, ConfigurationError
from error_translator.domain.signals import Failure, Opaque, Text, tag_signal


class TestDomainErrors:
    def test_configuration_error_is_runtime(self):
        err = ConfigurationError("bad config")
        assert isinstance(err, RuntimeError)
        assert str(err) == "bad config"

    def test_catalog_error_is_value_error(self):
        err = CatalogError("duplicate")
        assert isinstance(err, ValueError)


class _ExplodingMessage:
    @property
    def message(self):
        raise RuntimeError("cannot read message")


class TestTagSignal:
    def test_string_is_text(self):
        assert tag_signal("tx_bad_seq") == Text("tx_bad_seq")

    def test_empty_string_is_text(self):
        assert tag_signal("") == Text("")

    def test_exception_without_traceback(self):
        signal = tag_signal(ValueError("boom"))
        assert signal == Failure(message="boom", stack=None)

    def test_raised_exception_carries_stack(self):
        try:
            raise ValueError("boom")
        except ValueError as exc:
            signal = tag_signal(exc)

        assert isinstance(signal, Failure)
        assert signal.message == "boom"
        assert "Traceback" in signal.stack
        assert "ValueError: boom" in signal.stack

    def test_mapping_with_message(self):
        signal = tag_signal({"message": "Failed to fetch", "stack": "at submit()"})
        assert signal == Failure(message="Failed to fetch", stack="at submit()")

    def test_mapping_with_non_text_stack(self):
        signal = tag_signal({"message": "oops", "stack": 12})
        assert signal == Failure(message="oops", stack=None)

    def test_mapping_without_message_is_opaque(self):
        assert tag_signal({"code": 500}) == Opaque()
        assert tag_signal({"message": 42}) == Opaque()

    def test_object_with_message_attribute(self):
        signal = tag_signal(SimpleNamespace(message="wallet locked"))
        assert signal == Failure(message="wallet locked", stack=None)

    def test_object_with_message_and_stack(self):
        signal = tag_signal(SimpleNamespace(message="oops", stack="line 1"))
        assert signal == Failure(message="oops", stack="line 1")

    def test_everything_else_is_opaque(self):
        for value in (None, 42, 3.5, [], ["tx_bad_seq"], object(), b"tx_bad_seq", SimpleNamespace()):
            assert tag_signal(value) == Opaque()

    def test_unreadable_object_is_opaque(self):
        assert tag_signal(_ExplodingMessage()) == Opaque()
