"""Formatter JSON dos logs da FSM.

Cada linha carrega os campos fixos abaixo mais o payload de
``StateTransition.to_log_dict()`` enviado pela máquina.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "machine_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter usado pelo handler de ``configure_logging``.

    Uma mudança de estado por evento sai assim:

        {"asctime": "...", "level": "DEBUG", "logger": "fsm.manager.machine",
         "message": "fsm_state_changed", "machine_id": "switch-1",
         "service": "fsm", "from_state": "off", "to_state": "on",
         "kind": "trigger", "event": "switchOn", "timestamp": "..."}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
