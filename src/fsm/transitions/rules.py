"""
Regras de transição derivadas da configuração da FSM.

Funções puras sobre um MachineConfig: resolução de destino por evento,
consulta de estados por evento e validação de integridade do grafo.
"""

from fsm.types.config import MachineConfig


def resolve_target(config: MachineConfig, state: str, event: str) -> str | None:
    """
    Resolve o destino de um evento a partir de um estado.

    Args:
        config: Configuração da máquina
        state: Estado de origem
        event: Evento disparado

    Returns:
        Estado de destino, ou None se não houver regra para o evento
    """
    return config.target_for(state, event)


def states_with_event(config: MachineConfig, event: str | None = None) -> list[str]:
    """
    Retorna os estados que definem regra para o evento.

    Sem evento (ou evento vazio), retorna todos os estados. A ordem
    segue a ordem de autoria da configuração.

    Args:
        config: Configuração da máquina
        event: Evento a filtrar (opcional)

    Returns:
        Lista de identificadores de estado (não os destinos)
    """
    if not event:
        return config.state_ids()

    return [
        state_id
        for state_id, state_def in config.states.items()
        if event in state_def.transitions
    ]


def get_events(config: MachineConfig, state: str) -> list[str]:
    """Eventos com regra definida a partir de ``state``."""
    state_def = config.states.get(state)
    if state_def is None:
        return []
    return list(state_def.transitions)


def validate_config(config: MachineConfig) -> list[str]:
    """
    Valida a integridade da configuração.

    Verifica:
    - O estado inicial existe em ``states``
    - Todo destino de transição existe em ``states``

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    if not config.has_state(config.initial):
        errors.append(f"Estado inicial {config.initial!r} ausente em states")

    for state_id, state_def in config.states.items():
        for event, target in state_def.transitions.items():
            if not config.has_state(target):
                errors.append(
                    f"Transição {state_id} --{event}--> {target}: destino inexistente"
                )

    return errors
