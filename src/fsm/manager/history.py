"""
Histórico linear de undo/redo da FSM.

Duas pilhas de identificadores de estado (topo = último elemento).
Qualquer mudança para frente invalida o redo.
"""

from collections import deque

from utils.errors import ConfigError


class TransitionHistory:
    """
    Pilhas de undo e redo da máquina de estados.

    Os valores empilhados vieram de um estado corrente válido e
    não são revalidados ao desempilhar.

    Attributes:
        limit: Máximo de entradas por pilha (None = ilimitado)
    """

    __slots__ = ("_limit", "_redo", "_undo")

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ConfigError(f"Limite de histórico deve ser >= 1, recebido: {limit}")
        self._limit = limit
        self._undo: deque[str] = deque(maxlen=limit)
        self._redo: deque[str] = deque(maxlen=limit)

    @property
    def limit(self) -> int | None:
        """Máximo de entradas por pilha."""
        return self._limit

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_stack(self) -> tuple[str, ...]:
        """Cópia da pilha de undo (mais recente por último)."""
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[str, ...]:
        """Cópia da pilha de redo (mais recente por último)."""
        return tuple(self._redo)

    def push(self, previous_state: str) -> None:
        """Registra mudança para frente: empilha no undo e limpa o redo."""
        self._undo.append(previous_state)
        self._redo.clear()

    def undo(self, current_state: str) -> str | None:
        """
        Desfaz uma mudança.

        Args:
            current_state: Estado atual, empilhado no redo

        Returns:
            Estado a adotar, ou None se não há o que desfazer
        """
        if not self._undo:
            return None
        self._redo.append(current_state)
        return self._undo.pop()

    def redo(self, current_state: str) -> str | None:
        """Espelho de ``undo``: desempilha do redo e empilha no undo."""
        if not self._redo:
            return None
        self._undo.append(current_state)
        return self._redo.pop()

    def clear(self) -> None:
        """Esvazia as duas pilhas."""
        self._undo.clear()
        self._redo.clear()
