"""
Registry Tests
==============

Dispatch order, unknown frame rejection and handler registration.
"""

import logging

import pytest

from resp_reply.config import ReplyConfig
from resp_reply.handler_registry import HandlerRegistry, convert_reply
from resp_reply.handlers import MessageHandler
from resp_reply.protocol import ArrayFrame, BulkStringFrame, IntegerFrame, RedisDataError


class UnknownFrameHandler(MessageHandler):
    """Handler for the test-only frame type."""

    def __init__(self, config, frame_type):
        super().__init__(config)
        self.frame_type = frame_type

    def can_handle(self, frame):
        return isinstance(frame, self.frame_type)

    def handle(self, frame):
        return "unknown"

    def get_name(self):
        return "UNKNOWN"


class TestDispatch:
    """Default dispatch behaviour."""

    def test_default_order(self, registry):
        assert registry.list_handlers() == ["SIMPLE_STRING", "INTEGER", "BULK_STRING", "ARRAY"]

    def test_unknown_frame_raises(self, registry, unknown_frame):
        with pytest.raises(RedisDataError) as exc_info:
            registry.convert(unknown_frame)
        assert "UnknownFrame" in str(exc_info.value)
        assert exc_info.value.frame is unknown_frame

    def test_unknown_nested_frame_raises(self, registry, unknown_frame):
        with pytest.raises(RedisDataError):
            registry.convert(ArrayFrame([IntegerFrame(1), unknown_frame]))

    def test_unknown_frame_is_logged(self, registry, unknown_frame, caplog):
        with caplog.at_level(logging.DEBUG, logger="resp_reply.handler_registry"):
            with pytest.raises(RedisDataError):
                registry.convert(unknown_frame)
        assert "UnknownFrame" in caplog.text

    def test_non_frame_value_raises(self, registry):
        with pytest.raises(RedisDataError):
            registry.convert("OK")


class TestRegistration:
    """Extending the registry."""

    def test_register_extra_handler(self, registry, unknown_frame_type, unknown_frame):
        registry.register(UnknownFrameHandler(registry.config, unknown_frame_type))
        assert registry.is_registered("unknown")
        assert registry.convert(ArrayFrame([unknown_frame, IntegerFrame(3)])) == ["unknown", 3]

    def test_register_replaces_same_name(self, registry):
        class DoublingIntegerHandler(MessageHandler):
            def can_handle(self, frame):
                return isinstance(frame, IntegerFrame)

            def handle(self, frame):
                return frame.value * 2

            def get_name(self):
                return "INTEGER"

        registry.register(DoublingIntegerHandler(registry.config))
        assert registry.list_handlers() == ["SIMPLE_STRING", "INTEGER", "BULK_STRING", "ARRAY"]
        assert registry.convert(ArrayFrame([IntegerFrame(4)])) == [8]

    def test_get_handler_missing(self, registry):
        assert registry.get_handler("PUSH") is None


class TestConvertReply:
    """Module-level helper."""

    def test_uses_given_config(self):
        frame = BulkStringFrame(b"caf\xe9")
        assert convert_reply(frame, ReplyConfig(encoding="latin-1")) == "café"

    def test_defaults_to_process_config(self):
        assert convert_reply(IntegerFrame(5)) == 5
        assert HandlerRegistry().config.encoding == "utf-8"
