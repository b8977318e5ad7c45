"""Exceções de domínio da máquina de estados."""

from __future__ import annotations


class FSMError(Exception):
    """Base para erros da máquina de estados."""


class ConfigError(FSMError):
    """Configuração ausente, vazia ou malformada."""


class InvalidStateError(FSMError):
    """Transição resolvida para um estado inexistente na configuração.

    Cobre tanto o destino desconhecido em ``change_state`` quanto o evento
    sem regra a partir do estado atual em ``trigger`` (destino ``None``).

    Attributes:
        state: Estado de destino tentado (``None`` se o evento não tem regra)
        event: Evento que originou a tentativa, quando houver
    """

    def __init__(self, state: str | None, event: str | None = None) -> None:
        self.state = state
        self.event = event
        if event is not None:
            message = f"Evento {event!r} não leva a um estado válido (destino: {state!r})"
        else:
            message = f"Estado inválido: {state!r}"
        super().__init__(message)
