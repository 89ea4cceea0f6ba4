"""
RESP reply handlers using the Strategy pattern.
Each handler recognises one frame variant and converts it to a native value.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from resp_reply.config import ReplyConfig
from resp_reply.protocol import (
    ArrayFrame, BulkStringFrame, Frame, IntegerFrame, NativeValue, RedisDataError, SimpleStringFrame
)

if TYPE_CHECKING:
    from resp_reply.handler_registry import HandlerRegistry


class MessageHandler(ABC):
    """Abstract base class for reply handlers."""
    
    def __init__(self, config: ReplyConfig):
        self.config = config
    
    @abstractmethod
    def can_handle(self, frame: Frame) -> bool:
        """Check whether this handler recognises the frame variant."""
        pass
    
    @abstractmethod
    def handle(self, frame: Frame) -> NativeValue:
        """Convert the frame to a native value."""
        pass
    
    @abstractmethod
    def get_name(self) -> str:
        """Get the handler name."""
        pass


class SimpleStringHandler(MessageHandler):
    """Simple string (+) handler."""
    
    def can_handle(self, frame: Frame) -> bool:
        return isinstance(frame, SimpleStringFrame)
    
    def handle(self, frame: Frame) -> str:
        if frame.text is None:
            raise RedisDataError("Unexpected: received null as RESP Simple String", frame)
        return frame.text
    
    def get_name(self) -> str:
        return "SIMPLE_STRING"


class IntegerHandler(MessageHandler):
    """Integer (:) handler."""
    
    def can_handle(self, frame: Frame) -> bool:
        return isinstance(frame, IntegerFrame)
    
    def handle(self, frame: Frame) -> int:
        return frame.value
    
    def get_name(self) -> str:
        return "INTEGER"


class BulkStringHandler(MessageHandler):
    """Bulk string ($) handler, decoding payloads with the configured charset."""
    
    def can_handle(self, frame: Frame) -> bool:
        return isinstance(frame, BulkStringFrame)
    
    def handle(self, frame: Frame):
        """
        Convert a bulk string frame.
        
        Returns:
            None for the null bulk string, "" for a zero-length payload,
            otherwise the payload decoded with the configured charset
        """
        if frame.is_null:
            return None
        if len(frame.content) == 0:
            return ""
        try:
            return self.config.decode(frame.content)
        except UnicodeDecodeError as e:
            raise RedisDataError(
                f"Cannot decode bulk string as {self.config.encoding}: {e}", frame
            ) from e
    
    def get_name(self) -> str:
        return "BULK_STRING"


class ArrayHandler(MessageHandler):
    """Array (*) handler. Children are converted through the owning registry."""
    
    def __init__(self, config: ReplyConfig, registry: "HandlerRegistry"):
        super().__init__(config)
        self.registry = registry
    
    def can_handle(self, frame: Frame) -> bool:
        return isinstance(frame, ArrayFrame)
    
    def handle(self, frame: Frame):
        if frame.is_null:
            return None
        
        result: List[NativeValue] = []
        # Reply order is significant
        for child in frame.children:
            result.append(self.registry.convert(child))
        return result
    
    def get_name(self) -> str:
        return "ARRAY"
