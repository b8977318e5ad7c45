"""
Testes da StateMachine.

Cobre construção, leitura de estado, transições diretas e por evento,
reset, consulta de estados e histórico de undo/redo.
"""

from __future__ import annotations

import pytest

from fsm import (
    ConfigError,
    InvalidStateError,
    MachineConfig,
    StateMachine,
    create_machine,
)


class TestConstruction:
    """Testa construção e estado inicial."""

    @pytest.mark.parametrize("config", [None, {}])
    def test_missing_config_raises_config_error(self, config) -> None:
        with pytest.raises(ConfigError):
            StateMachine(config)

    def test_initial_state_after_construction(self, switch_config) -> None:
        machine = StateMachine(switch_config)
        assert machine.get_state() == "off"
        assert machine.state == "off"
        assert machine.undo_stack == ()
        assert machine.redo_stack == ()

    def test_accepts_machine_config_instance(self, switch_config) -> None:
        config = MachineConfig.from_mapping(switch_config)
        machine = StateMachine(config)
        assert machine.config is config

    def test_invalid_initial_is_deferred_until_transition(self) -> None:
        """Estado inicial inválido só falha na primeira transição."""
        machine = StateMachine({"initial": "ghost", "states": {"a": {}}})
        assert machine.get_state() == "ghost"

        with pytest.raises(InvalidStateError):
            machine.reset()

        assert machine.get_state() == "ghost"
        assert machine.undo_stack == ()

    def test_strict_mode_rejects_invalid_initial(self) -> None:
        with pytest.raises(ConfigError, match="ghost"):
            StateMachine({"initial": "ghost", "states": {"a": {}}}, strict=True)

    def test_strict_mode_rejects_dangling_target(self) -> None:
        config = {"initial": "a", "states": {"a": {"transitions": {"go": "nowhere"}}}}
        with pytest.raises(ConfigError, match="nowhere"):
            StateMachine(config, strict=True)

    def test_strict_mode_accepts_consistent_config(self, workflow_config) -> None:
        machine = StateMachine(workflow_config, strict=True)
        assert machine.get_state() == "normal"

    def test_caller_mutation_does_not_reach_machine(self, switch_config) -> None:
        machine = StateMachine(switch_config)
        switch_config["states"]["off"]["transitions"]["switchOn"] = "broken"
        switch_config["states"]["extra"] = {}

        machine.trigger("switchOn")

        assert machine.get_state() == "on"
        assert machine.get_states() == ["off", "on"]

    def test_shared_config_cannot_be_mutated_through_a_machine(self, switch_config) -> None:
        """Máquinas que compartilham um MachineConfig não se afetam."""
        config = MachineConfig.from_mapping(switch_config)
        first = StateMachine(config)
        second = StateMachine(config)

        with pytest.raises(AttributeError):
            first.config.states.pop("off")
        with pytest.raises(TypeError):
            first.config.states["off2"] = first.config.states["on"]
        with pytest.raises(TypeError):
            first.config.states["off"].transitions["switchOn"] = "off2"

        assert second.get_state() == "off"
        assert second.get_states() == ["off", "on"]
        second.trigger("switchOn")
        assert second.get_state() == "on"


class TestChangeStateAndTrigger:
    """Testa change_state, trigger e reset."""

    def test_change_state_moves_and_records_history(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.change_state("hungry")

        assert machine.get_state() == "hungry"
        assert machine.undo_stack == ("normal",)

    @pytest.mark.parametrize("target", ["unknown", "", None])
    def test_change_state_to_invalid_state_leaves_machine_untouched(
        self, workflow_config, target
    ) -> None:
        machine = StateMachine(workflow_config)
        machine.change_state("busy")
        machine.undo()

        with pytest.raises(InvalidStateError) as exc_info:
            machine.change_state(target)

        assert exc_info.value.state == target
        assert exc_info.value.event is None
        assert machine.get_state() == "normal"
        assert machine.undo_stack == ()
        assert machine.redo_stack == ("busy",)

    def test_trigger_follows_event_rules(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")
        machine.trigger("get_tired")
        machine.trigger("get_up")

        assert machine.get_state() == "normal"
        assert machine.undo_stack == ("normal", "busy", "sleeping")

    def test_trigger_without_rule_raises_invalid_state(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)

        with pytest.raises(InvalidStateError) as exc_info:
            machine.trigger("get_hungry")

        assert exc_info.value.state is None
        assert exc_info.value.event == "get_hungry"
        assert machine.get_state() == "normal"
        assert machine.undo_stack == ()

    def test_trigger_from_state_without_transitions(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.change_state("archived")

        with pytest.raises(InvalidStateError):
            machine.trigger("study")

        assert machine.get_state() == "archived"

    def test_reset_goes_to_initial_through_history(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")
        machine.trigger("get_hungry")
        machine.reset()

        assert machine.get_state() == "normal"
        assert machine.undo_stack == ("normal", "busy", "hungry")
        assert machine.undo() is True
        assert machine.get_state() == "hungry"

    def test_can_trigger_and_get_events(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")

        assert machine.get_events() == ["get_tired", "get_hungry"]
        assert machine.can_trigger("get_tired") is True
        assert machine.can_trigger("eat") is False


class TestGetStates:
    """Testa get_states com e sem evento."""

    def test_without_event_returns_all_states_in_order(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        assert machine.get_states() == ["normal", "busy", "hungry", "sleeping", "archived"]
        assert machine.get_states("") == machine.get_states()

    def test_with_event_returns_source_states(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        assert machine.get_states("get_hungry") == ["busy", "sleeping"]
        assert machine.get_states("study") == ["normal"]
        assert machine.get_states("unknown") == []

    def test_reads_are_idempotent(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        assert machine.get_states() == machine.get_states()
        assert machine.get_state() == machine.get_state()


class TestUndoRedo:
    """Testa histórico linear de undo/redo."""

    def test_switch_scenario(self, switch_config) -> None:
        machine = StateMachine(switch_config)

        assert machine.get_state() == "off"
        machine.trigger("switchOn")
        assert machine.get_state() == "on"
        machine.trigger("switchOff")
        assert machine.get_state() == "off"

        assert machine.undo() is True
        assert machine.get_state() == "on"
        assert machine.undo() is True
        assert machine.get_state() == "off"
        assert machine.undo() is False
        assert machine.get_state() == "off"
        assert machine.redo() is True
        assert machine.get_state() == "on"

    def test_undo_redo_on_empty_stacks(self, switch_config) -> None:
        machine = StateMachine(switch_config)

        assert machine.undo() is False
        assert machine.redo() is False
        assert machine.get_state() == "off"
        assert machine.undo_stack == ()
        assert machine.redo_stack == ()

    def test_redo_on_empty_does_not_touch_undo_stack(self, switch_config) -> None:
        machine = StateMachine(switch_config)
        machine.trigger("switchOn")

        assert machine.redo() is False
        assert machine.undo_stack == ("off",)

    def test_round_trip(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.change_state("sleeping")

        machine.undo()
        assert machine.get_state() == "normal"
        machine.redo()
        assert machine.get_state() == "sleeping"

    @pytest.mark.parametrize(
        "forward",
        [
            lambda m: m.change_state("hungry"),
            lambda m: m.trigger("get_tired"),
            lambda m: m.reset(),
        ],
    )
    def test_forward_change_invalidates_redo(self, workflow_config, forward) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")
        machine.trigger("get_tired")
        machine.undo()
        assert machine.can_redo is True

        forward(machine)

        assert machine.redo() is False
        assert machine.redo_stack == ()

    def test_failed_change_keeps_redo_history(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")
        machine.undo()

        with pytest.raises(InvalidStateError):
            machine.trigger("eat")

        assert machine.redo() is True
        assert machine.get_state() == "busy"

    def test_undo_and_redo_walk_multiple_steps(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        for event in ("study", "get_hungry", "eat"):
            machine.trigger(event)

        assert [machine.undo() for _ in range(4)] == [True, True, True, False]
        assert machine.get_state() == "normal"
        assert machine.redo_stack == ("normal", "hungry", "busy")

        assert [machine.redo() for _ in range(4)] == [True, True, True, False]
        assert machine.get_state() == "normal"
        assert machine.undo_stack == ("normal", "busy", "hungry")

    def test_clear_history(self, workflow_config) -> None:
        machine = StateMachine(workflow_config)
        machine.trigger("study")
        machine.trigger("get_tired")
        machine.undo()

        machine.clear_history()

        assert machine.get_state() == "busy"
        assert machine.undo() is False
        assert machine.redo() is False

    def test_history_limit_drops_oldest_entries(self, workflow_config) -> None:
        machine = StateMachine(workflow_config, history_limit=2)
        for event in ("study", "get_hungry", "eat"):
            machine.trigger(event)

        assert machine.undo_stack == ("busy", "hungry")
        assert machine.undo() is True
        assert machine.undo() is True
        assert machine.undo() is False
        assert machine.get_state() == "busy"

    def test_history_limit_must_be_positive(self, switch_config) -> None:
        with pytest.raises(ConfigError):
            StateMachine(switch_config, history_limit=0)


class TestSummaryAndFactory:
    """Testa get_state_summary e create_machine."""

    def test_state_summary(self, workflow_config) -> None:
        machine = StateMachine(workflow_config, name="worker-1", history_limit=5)
        machine.trigger("study")

        assert machine.get_state_summary() == {
            "machine_id": "worker-1",
            "current_state": "busy",
            "events": ["get_tired", "get_hungry"],
            "undo_depth": 1,
            "redo_depth": 0,
            "history_limit": 5,
        }

    def test_create_machine_uses_settings(self, workflow_config) -> None:
        from config.settings import FSMSettings

        machine = create_machine(
            workflow_config,
            name="factory",
            settings=FSMSettings(history_limit=3, strict_config=True),
        )

        assert machine.name == "factory"
        assert machine.get_state_summary()["history_limit"] == 3

    def test_create_machine_strict_settings_validate_config(self) -> None:
        from config.settings import FSMSettings

        with pytest.raises(ConfigError):
            create_machine(
                {"initial": "x", "states": {"a": {}}},
                settings=FSMSettings(strict_config=True),
            )

    def test_create_machine_rejects_invalid_settings(self, switch_config) -> None:
        from config.settings import FSMSettings

        with pytest.raises(ConfigError, match="FSM_HISTORY_LIMIT"):
            create_machine(switch_config, settings=FSMSettings(history_limit=0))

    def test_create_machine_with_non_numeric_limit_in_env(
        self, monkeypatch, switch_config
    ) -> None:
        from config.settings import get_fsm_settings

        monkeypatch.setenv("FSM_HISTORY_LIMIT", "lots")
        get_fsm_settings.cache_clear()
        try:
            with pytest.raises(ConfigError, match="FSM_HISTORY_LIMIT"):
                create_machine(switch_config)
        finally:
            get_fsm_settings.cache_clear()

    def test_create_machine_reads_environment(self, monkeypatch, switch_config) -> None:
        from config.settings import get_fsm_settings

        monkeypatch.setenv("FSM_HISTORY_LIMIT", "1")
        get_fsm_settings.cache_clear()
        try:
            machine = create_machine(switch_config)
            machine.trigger("switchOn")
            machine.trigger("switchOff")
            assert machine.undo_stack == ("on",)
        finally:
            get_fsm_settings.cache_clear()
