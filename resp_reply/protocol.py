"""
RESP frame model and protocol errors.
Frames are produced by an upstream decoder; this package only reads them.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


class RedisDataError(Exception):
    """Exception raised when a reply frame does not match the RESP structure."""

    def __init__(self, message: str, frame: Optional["Frame"] = None):
        super().__init__(message)
        self.frame = frame


class Frame:
    """Base class for all decoded RESP frames."""
    pass


@dataclass(frozen=True)
class SimpleStringFrame(Frame):
    """Simple string reply (+OK, +PONG, etc.)."""
    text: Optional[str]


@dataclass(frozen=True)
class IntegerFrame(Frame):
    """Integer reply (:42)."""
    value: int


@dataclass(frozen=True)
class BulkStringFrame(Frame):
    """
    Bulk string reply.
    content is None for the null bulk string ($-1).
    """
    content: Optional[bytes]

    @property
    def is_null(self) -> bool:
        return self.content is None


@dataclass(frozen=True)
class ArrayFrame(Frame):
    """
    Array reply holding nested frames.
    children is None for the null array (*-1). Any sequence given is stored
    as a tuple so the frame stays immutable and hashable.
    """
    children: Optional[Tuple[Frame, ...]]

    def __post_init__(self):
        if self.children is not None:
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_null(self) -> bool:
        return self.children is None


# Converted reply: str, int, None or a list of converted replies
NativeValue = Union[str, int, None, List["NativeValue"]]
