"""
Exports públicos do módulo fsm/manager.

Máquina de estados (StateMachine) e histórico de undo/redo.
"""

from fsm.manager.history import TransitionHistory
from fsm.manager.machine import (
    StateMachine,
    create_machine,
)

__all__ = [
    "StateMachine",
    "TransitionHistory",
    "create_machine",
]
