"""
Text decoding configuration for bulk string replies.
Holds the process-wide charset used when converting payload bytes.
"""
import codecs
import os
from dataclasses import dataclass


CHARSET_ENV = "RESP_REPLY_CHARSET"
DECODE_ERRORS_ENV = "RESP_REPLY_DECODE_ERRORS"


@dataclass(frozen=True)
class ReplyConfig:
    """Charset settings applied to bulk string payloads."""
    encoding: str = "utf-8"
    errors: str = "strict"  # Any registered codec error handler

    def __post_init__(self):
        try:
            # Rejects unknown codecs and bytes-to-bytes codecs such as rot13 or base64
            b"".decode(self.encoding)
        except LookupError:
            raise ValueError(f"'{self.encoding}' is not a known text encoding")
        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            raise ValueError(f"unknown decode error handler '{self.errors}'")

    @classmethod
    def from_env(cls) -> "ReplyConfig":
        """Build a config from environment variables, falling back to the defaults."""
        return cls(
            encoding=os.environ.get(CHARSET_ENV, "utf-8"),
            errors=os.environ.get(DECODE_ERRORS_ENV, "strict"),
        )

    def decode(self, payload: bytes) -> str:
        return payload.decode(self.encoding, self.errors)


_default_config = ReplyConfig.from_env()


def get_default_config() -> ReplyConfig:
    """Get the process-wide reply config."""
    return _default_config


def set_default_charset(encoding: str, errors: str = "strict") -> ReplyConfig:
    """Replace the process-wide reply config and return the new one."""
    global _default_config
    _default_config = ReplyConfig(encoding=encoding, errors=errors)
    return _default_config


def reset_default_config() -> ReplyConfig:
    """Rebuild the process-wide reply config from the environment."""
    global _default_config
    _default_config = ReplyConfig.from_env()
    return _default_config
