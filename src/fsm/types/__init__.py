"""
Exports públicos do módulo fsm/types.

Configuração da máquina e registros de transição.
"""

from fsm.types.config import MachineConfig, StateDef
from fsm.types.transition import StateTransition, TransitionKind

__all__ = [
    "MachineConfig",
    "StateDef",
    "StateTransition",
    "TransitionKind",
]
