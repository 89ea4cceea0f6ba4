"""
Handler registry for dispatching RESP frames to their handlers.
Uses Registry pattern so new frame variants can be plugged in.
"""
import logging
from typing import List, Optional

from resp_reply.config import ReplyConfig, get_default_config
from resp_reply.handlers import (
    ArrayHandler, BulkStringHandler, IntegerHandler, MessageHandler, SimpleStringHandler
)
from resp_reply.protocol import Frame, NativeValue, RedisDataError

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered registry of reply handlers; the first match converts a frame."""
    
    def __init__(self, config: Optional[ReplyConfig] = None):
        self.config = config or get_default_config()
        self._handlers: List[MessageHandler] = []
        self._register_handlers()
    
    def _register_handlers(self) -> None:
        """Register the built-in handlers in dispatch order."""
        handlers = [
            SimpleStringHandler(self.config),
            IntegerHandler(self.config),
            BulkStringHandler(self.config),
            ArrayHandler(self.config, self),
        ]
        
        for handler in handlers:
            self.register(handler)
    
    def register(self, handler: MessageHandler) -> None:
        """Register a handler. A handler with an existing name replaces it in place."""
        name = handler.get_name().upper()
        for i, existing in enumerate(self._handlers):
            if existing.get_name().upper() == name:
                self._handlers[i] = handler
                return
        self._handlers.append(handler)
    
    def get_handler(self, name: str) -> Optional[MessageHandler]:
        """Get a handler by name."""
        for handler in self._handlers:
            if handler.get_name().upper() == name.upper():
                return handler
        return None
    
    def convert(self, frame: Frame) -> NativeValue:
        """
        Convert a frame, recursing into arrays.
        
        Args:
            frame: Fully decoded reply frame
            
        Returns:
            str, int, None or a list of converted children
            
        Raises:
            RedisDataError: if the frame (or any nested frame) is malformed
                or of an unknown type
        """
        for handler in self._handlers:
            if handler.can_handle(frame):
                return handler.handle(frame)
        
        logger.debug("No handler for frame type %s", type(frame).__name__)
        raise RedisDataError(
            f"Received unexpected data type from redis server: {type(frame).__name__}", frame
        )
    
    def list_handlers(self) -> list:
        """Get handler names in dispatch order."""
        return [handler.get_name() for handler in self._handlers]
    
    def is_registered(self, name: str) -> bool:
        """Check if a handler is registered."""
        return self.get_handler(name) is not None


def convert_reply(frame: Frame, config: Optional[ReplyConfig] = None) -> NativeValue:
    """Convert a reply frame using the given config or the process-wide default."""
    return HandlerRegistry(config).convert(frame)
