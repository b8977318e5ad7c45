"""Agregador de settings da FSM.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    FSMSettings,
    get_base_settings,
    get_fsm_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "FSMSettings",
    "get_base_settings",
    "get_fsm_settings",
]
