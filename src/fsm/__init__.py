"""
Módulo FSM: Máquina de estados finita configurável.

Este módulo implementa uma FSM guiada por configuração declarativa,
com transições diretas ou por evento e histórico linear de undo/redo.

Estrutura:
    - types/: Configuração (MachineConfig, StateDef) e registros de transição
    - transitions/: Regras derivadas da configuração
    - manager/: Máquina de estados (StateMachine) e histórico

Uso:
    from fsm import StateMachine

    machine = StateMachine({
        "initial": "off",
        "states": {
            "off": {"transitions": {"switchOn": "on"}},
            "on": {"transitions": {"switchOff": "off"}},
        },
    })
    machine.trigger("switchOn")
    machine.undo()
"""

# Manager
from fsm.manager import (
    StateMachine,
    TransitionHistory,
    create_machine,
)

# Transições
from fsm.transitions import (
    get_events,
    resolve_target,
    states_with_event,
    validate_config,
)

# Types
from fsm.types import (
    MachineConfig,
    StateDef,
    StateTransition,
    TransitionKind,
)

# Erros
from utils.errors import ConfigError, FSMError, InvalidStateError

__all__ = [
    # Erros
    "ConfigError",
    "FSMError",
    "InvalidStateError",
    # Types
    "MachineConfig",
    "StateDef",
    # Manager
    "StateMachine",
    "StateTransition",
    "TransitionHistory",
    "TransitionKind",
    "create_machine",
    # Transições
    "get_events",
    "resolve_target",
    "states_with_event",
    "validate_config",
]
