"""
Configuração declarativa da máquina de estados.

Este módulo define o formato da configuração aceita pela FSM:

    {
        "initial": "off",
        "states": {
            "off": {"transitions": {"switchOn": "on"}},
            "on": {"transitions": {"switchOff": "off"}},
        },
    }

A configuração é copiada para modelos imutáveis na construção, então
mutações posteriores no dict do chamador não afetam a máquina.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from utils.errors import ConfigError


class StateDef(BaseModel):
    """
    Definição de um estado: mapa de evento → estado de destino.

    Attributes:
        transitions: Regras de saída do estado (pode ser vazio), somente leitura
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    transitions: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("transitions", mode="after")
    @classmethod
    def freeze_transitions(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class MachineConfig(BaseModel):
    """
    Configuração completa da máquina.

    A ordem de ``states`` é a ordem de autoria e é preservada em
    todas as consultas. Os mapas são somente leitura, então uma
    mesma instância pode ser compartilhada entre máquinas.

    Attributes:
        initial: Estado inicial (não validado aqui, ver ``validate_config``)
        states: Mapa de identificador de estado → StateDef
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    initial: str
    states: Mapping[str, StateDef]

    @field_validator("states", mode="after")
    @classmethod
    def freeze_states(cls, value: Mapping[str, StateDef]) -> Mapping[str, StateDef]:
        return MappingProxyType(dict(value))

    @classmethod
    def from_mapping(cls, data: MachineConfig | Mapping[str, Any] | None) -> MachineConfig:
        """
        Constrói a configuração a partir do formato de dict.

        Args:
            data: Dict no formato ``{"initial": ..., "states": {...}}``
                ou um MachineConfig já construído

        Returns:
            MachineConfig imutável

        Raises:
            ConfigError: Se a configuração estiver ausente, vazia ou malformada
        """
        if isinstance(data, MachineConfig):
            return data
        if not data:
            raise ConfigError("Configuração da máquina não informada")
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuração deve ser um mapa, recebido: {type(data).__name__}")

        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"Configuração inválida: {exc}") from exc

    def state_ids(self) -> list[str]:
        """Identificadores de estado na ordem de autoria."""
        return list(self.states)

    def has_state(self, state: str | None) -> bool:
        """Verifica se o identificador é um estado configurado."""
        return isinstance(state, str) and bool(state) and state in self.states

    def target_for(self, state: str, event: str) -> str | None:
        """Destino de ``event`` a partir de ``state`` (None se não houver regra)."""
        state_def = self.states.get(state)
        if state_def is None:
            return None
        return state_def.transitions.get(event)
