"""
RESP reply conversion.
Turns decoded RESP frames into native Python values.
"""
import logging

from resp_reply.config import (
    ReplyConfig, get_default_config, reset_default_config, set_default_charset
)
from resp_reply.handler_registry import HandlerRegistry, convert_reply
from resp_reply.handlers import (
    MessageHandler, SimpleStringHandler, IntegerHandler, BulkStringHandler, ArrayHandler
)
from resp_reply.protocol import (
    Frame, SimpleStringFrame, IntegerFrame, BulkStringFrame, ArrayFrame,
    NativeValue, RedisDataError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ReplyConfig", "get_default_config", "reset_default_config", "set_default_charset",
    "HandlerRegistry", "convert_reply",
    "MessageHandler", "SimpleStringHandler", "IntegerHandler", "BulkStringHandler", "ArrayHandler",
    "Frame", "SimpleStringFrame", "IntegerFrame", "BulkStringFrame", "ArrayFrame",
    "NativeValue", "RedisDataError",
]
