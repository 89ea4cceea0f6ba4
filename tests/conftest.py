"""
Test Configuration
==================

Pytest fixtures shared by the reply conversion tests.
"""

import pytest

from resp_reply.config import ReplyConfig
from resp_reply.handler_registry import HandlerRegistry
from resp_reply.protocol import Frame


class UnknownFrame(Frame):
    """Frame variant no handler recognises."""
    pass


@pytest.fixture
def registry():
    """Provide a registry with the default utf-8 config."""
    return HandlerRegistry(ReplyConfig())


@pytest.fixture
def unknown_frame_type():
    """Provide a frame class of an unsupported type."""
    return UnknownFrame


@pytest.fixture
def unknown_frame(unknown_frame_type):
    """Provide a frame of an unsupported type."""
    return unknown_frame_type()
