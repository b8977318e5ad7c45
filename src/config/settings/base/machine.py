"""Settings da máquina de estados.

Padrões aplicados por ``create_machine`` quando o chamador não
informa limite de histórico ou modo estrito.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from utils.errors import ConfigError


@dataclass(frozen=True)
class FSMSettings:
    """Configurações da FSM.

    Attributes:
        history_limit: Máximo de entradas por pilha de histórico (None = ilimitado)
        strict_config: Valida estado inicial e destinos na construção
    """

    history_limit: int | None = None
    strict_config: bool = False

    def validate(self) -> list[str]:
        """Valida configurações da FSM.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.history_limit is not None and self.history_limit < 1:
            errors.append("FSM_HISTORY_LIMIT deve ser >= 1")

        return errors


def _parse_optional_int(key: str) -> int | None:
    """Lê um int opcional da env, tratando vazio como ausente."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{key} deve ser inteiro, recebido: {raw!r}") from exc


def _load_fsm_from_env() -> FSMSettings:
    """Carrega FSMSettings de variáveis de ambiente."""
    return FSMSettings(
        history_limit=_parse_optional_int("FSM_HISTORY_LIMIT"),
        strict_config=os.getenv("FSM_STRICT_CONFIG", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_fsm_settings() -> FSMSettings:
    """Retorna instância cacheada de FSMSettings."""
    return _load_fsm_from_env()
