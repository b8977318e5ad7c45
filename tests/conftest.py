"""Configuração do pytest para o projeto fsm."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def switch_config() -> dict:
    """Configuração liga/desliga usada em vários testes."""
    return {
        "initial": "off",
        "states": {
            "off": {"transitions": {"switchOn": "on"}},
            "on": {"transitions": {"switchOff": "off"}},
        },
    }


@pytest.fixture
def workflow_config() -> dict:
    """Configuração com estado sem saída e eventos compartilhados."""
    return {
        "initial": "normal",
        "states": {
            "normal": {"transitions": {"study": "busy"}},
            "busy": {"transitions": {"get_tired": "sleeping", "get_hungry": "hungry"}},
            "hungry": {"transitions": {"eat": "normal"}},
            "sleeping": {"transitions": {"get_hungry": "hungry", "get_up": "normal"}},
            "archived": {},
        },
    }
