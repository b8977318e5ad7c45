"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigError,
    FSMError,
    InvalidStateError,
)

__all__ = [
    "ConfigError",
    "FSMError",
    "InvalidStateError",
]
