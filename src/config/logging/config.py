"""Instalação do logging JSON no root logger.

A FSM só chama ``logging.getLogger(__name__)``; quem embute a
máquina decide se e como os logs saem, chamando uma destas funções
na inicialização:

    configure_logging(level="DEBUG", service_name="checkout")
    configure_logging_from_settings(get_base_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import MachineContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.base.core import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base.core import BaseSettings

DEFAULT_SERVICE_NAME = "fsm"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    machine_id_getter: Callable[[], str] | None = None,
) -> None:
    """Troca os handlers do root logger por um único handler JSON.

    Args:
        level: Nível de log, sem diferenciar maiúsculas.
        service_name: Valor do campo ``service``.
        machine_id_getter: Fallback de ``machine_id`` para logs sem ``extra``.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(MachineContextFilter(service_name, machine_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def configure_logging_from_settings(settings: BaseSettings) -> None:
    """Configura logging a partir de BaseSettings (LOG_LEVEL, SERVICE_NAME)."""
    configure_logging(level=settings.log_level, service_name=settings.service_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
