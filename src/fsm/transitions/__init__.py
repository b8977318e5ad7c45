"""
Exports públicos do módulo fsm/transitions.

Regras de transição derivadas da configuração da FSM.
"""

from fsm.transitions.rules import (
    get_events,
    resolve_target,
    states_with_event,
    validate_config,
)

__all__ = [
    "get_events",
    "resolve_target",
    "states_with_event",
    "validate_config",
]
