"""Filter que identifica a máquina de estados em cada log.

Uma aplicação pode manter várias StateMachine vivas ao mesmo tempo;
o ``machine_id`` permite separar as transições de cada uma.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class MachineContextFilter(logging.Filter):
    """Completa o record com ``service`` e ``machine_id``.

    A StateMachine já envia ``machine_id`` no ``extra``; o getter só
    é usado para logs emitidos fora dela (ex: código do chamador).
    """

    def __init__(
        self,
        service_name: str,
        machine_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_machine_id = machine_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        machine_id = getattr(record, "machine_id", None)
        record.machine_id = machine_id if machine_id else self._get_machine_id()
        record.service = self._service_name
        return True
