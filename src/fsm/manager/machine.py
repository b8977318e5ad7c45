"""
Máquina de estados (StateMachine) com histórico de undo/redo.

Este módulo implementa a FSM principal: mantém o estado atual,
aplica mudanças diretas ou por evento e controla as pilhas de
undo/redo.
"""

import logging
from collections.abc import Mapping
from typing import Any

from config.settings.base.machine import FSMSettings, get_fsm_settings
from fsm.manager.history import TransitionHistory
from fsm.transitions.rules import (
    get_events,
    resolve_target,
    states_with_event,
    validate_config,
)
from fsm.types.config import MachineConfig
from fsm.types.transition import StateTransition, TransitionKind
from utils.errors import ConfigError, InvalidStateError

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Máquina de estados finita configurável.

    ``change_state`` é a única primitiva de mutação para frente;
    ``trigger`` e ``reset`` delegam a ela e herdam validação e
    efeitos no histórico. Falhas não deixam mutação parcial.

    Attributes:
        state: Estado atual
        config: Configuração imutável da máquina
        name: Identificador da máquina para logs
    """

    __slots__ = ("_config", "_history", "_name", "_state")

    def __init__(
        self,
        config: MachineConfig | Mapping[str, Any] | None,
        *,
        name: str = "",
        history_limit: int | None = None,
        strict: bool = False,
    ) -> None:
        """
        Inicializa a máquina de estados.

        Args:
            config: Configuração (dict no formato ``initial``/``states``
                ou MachineConfig)
            name: Identificador da máquina para logs
            history_limit: Máximo de entradas por pilha (None = ilimitado)
            strict: Valida estado inicial e destinos na construção

        Raises:
            ConfigError: Configuração ausente, malformada ou, em modo
                estrito, inconsistente
        """
        self._config = MachineConfig.from_mapping(config)

        if strict:
            errors = validate_config(self._config)
            if errors:
                raise ConfigError("; ".join(errors))

        self._name = name
        self._history = TransitionHistory(history_limit)
        # Estado inicial só é validado na primeira transição (exceto strict)
        self._state = self._config.initial

        logger.debug(
            "fsm_created",
            extra={
                "machine_id": name,
                "initial": self._state,
                "state_count": len(self._config.states),
                "history_limit": history_limit,
                "strict": strict,
            },
        )

    @property
    def state(self) -> str:
        """Estado atual da máquina."""
        return self._state

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._name

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def undo_stack(self) -> tuple[str, ...]:
        """Pilha de undo (cópia, mais recente por último)."""
        return self._history.undo_stack

    @property
    def redo_stack(self) -> tuple[str, ...]:
        """Pilha de redo (cópia, mais recente por último)."""
        return self._history.redo_stack

    def get_state(self) -> str:
        """Retorna o estado atual."""
        return self._state

    def change_state(self, state: str) -> None:
        """
        Vai para o estado informado.

        Args:
            state: Estado de destino

        Raises:
            InvalidStateError: Se ``state`` não é um estado configurado
        """
        self._apply(state, TransitionKind.CHANGE)

    def trigger(self, event: str) -> None:
        """
        Muda de estado segundo as regras de transição do evento.

        Evento sem regra a partir do estado atual resolve para destino
        inexistente e falha como qualquer estado inválido.

        Raises:
            InvalidStateError: Se o evento não leva a um estado válido
        """
        target = resolve_target(self._config, self._state, event)
        self._apply(target, TransitionKind.TRIGGER, event=event)

    def reset(self) -> None:
        """
        Volta ao estado inicial, registrando a mudança no histórico.

        Raises:
            InvalidStateError: Se o estado inicial não está configurado
        """
        self._apply(self._config.initial, TransitionKind.RESET)

    def get_states(self, event: str | None = None) -> list[str]:
        """
        Retorna os estados com regra de transição para o evento.

        Sem evento, retorna todos os estados na ordem da configuração.
        """
        return states_with_event(self._config, event)

    def get_events(self) -> list[str]:
        """Retorna os eventos com regra a partir do estado atual."""
        return get_events(self._config, self._state)

    def can_trigger(self, event: str) -> bool:
        """Verifica se o evento leva a um estado válido a partir do atual."""
        return self._config.has_state(resolve_target(self._config, self._state, event))

    def undo(self) -> bool:
        """
        Volta ao estado anterior.

        Returns:
            False se não há histórico para desfazer
        """
        previous = self._history.undo(self._state)
        if previous is None:
            return False
        self._adopt(previous, TransitionKind.UNDO)
        return True

    def redo(self) -> bool:
        """
        Refaz a última mudança desfeita.

        Returns:
            False se não há histórico para refazer
        """
        following = self._history.redo(self._state)
        if following is None:
            return False
        self._adopt(following, TransitionKind.REDO)
        return True

    def clear_history(self) -> None:
        """Limpa o histórico de transições sem alterar o estado."""
        self._history.clear()
        logger.debug("fsm_history_cleared", extra={"machine_id": self._name})

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "machine_id": self._name,
            "current_state": self._state,
            "events": self.get_events(),
            "undo_depth": len(self._history.undo_stack),
            "redo_depth": len(self._history.redo_stack),
            "history_limit": self._history.limit,
        }

    def _apply(
        self,
        target: str | None,
        kind: TransitionKind,
        event: str | None = None,
    ) -> None:
        # Validação antes de qualquer mutação
        if not self._config.has_state(target):
            logger.info(
                "fsm_transition_rejected",
                extra={
                    "machine_id": self._name,
                    "current_state": self._state,
                    "target": target,
                    "kind": kind.value,
                    "event": event,
                },
            )
            raise InvalidStateError(target, event)

        self._history.push(self._state)
        self._adopt(target, kind, event)

    def _adopt(self, state: str, kind: TransitionKind, event: str | None = None) -> None:
        transition = StateTransition(
            from_state=self._state,
            to_state=state,
            kind=kind,
            event=event,
        )
        self._state = state
        logger.debug(
            "fsm_state_changed",
            extra={"machine_id": self._name, **transition.to_log_dict()},
        )


def create_machine(
    config: MachineConfig | Mapping[str, Any] | None,
    *,
    name: str = "",
    settings: FSMSettings | None = None,
) -> StateMachine:
    """
    Factory function para criar uma FSM com os padrões de ambiente.

    Args:
        config: Configuração da máquina
        name: Identificador da máquina para logs
        settings: FSMSettings (usa get_fsm_settings() se None)

    Returns:
        StateMachine configurada

    Raises:
        ConfigError: Se as settings forem inválidas
    """
    settings = settings or get_fsm_settings()
    errors = settings.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    return StateMachine(
        config,
        name=name,
        history_limit=settings.history_limit,
        strict=settings.strict_config,
    )
