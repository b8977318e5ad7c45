"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    VALID_LOG_LEVELS,
    BaseSettings,
    get_base_settings,
)
from config.settings.base.machine import (
    FSMSettings,
    get_fsm_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    # Core
    "BaseSettings",
    # FSM
    "FSMSettings",
    "get_base_settings",
    "get_fsm_settings",
]
