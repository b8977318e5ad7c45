"""
Registro de transições de estado.

Cada mudança de estado bem-sucedida (direta, por evento, reset,
undo ou redo) gera um StateTransition imutável, usado como payload
de logging estruturado.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class TransitionKind(StrEnum):
    """Origem de uma mudança de estado."""

    CHANGE = "change"
    TRIGGER = "trigger"
    RESET = "reset"
    UNDO = "undo"
    REDO = "redo"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Representa uma mudança de estado efetuada pela FSM.

    Attributes:
        from_state: Estado anterior
        to_state: Estado adotado
        kind: Operação que causou a mudança
        event: Evento disparado (apenas para TransitionKind.TRIGGER)
        timestamp: Momento da mudança (UTC)
    """

    from_state: str
    to_state: str
    kind: TransitionKind
    event: str | None = None
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        """Valida invariantes do objeto após inicialização."""
        if self.kind is TransitionKind.TRIGGER and self.event is None:
            raise ValueError("transição por evento deve informar event")

    def to_log_dict(self) -> dict[str, Any]:
        """
        Retorna representação para logs estruturados.

        Returns:
            Dict serializável em JSON
        """
        return {
            "from_state": self.from_state,
            "to_state": self.to_state,
            "kind": self.kind.value,
            "event": self.event,
            "timestamp": self.timestamp.isoformat(),
        }
