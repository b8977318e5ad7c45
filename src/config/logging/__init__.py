"""Logging estruturado (JSON) para aplicações que embutem a FSM."""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.filters import MachineContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "MachineContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]
