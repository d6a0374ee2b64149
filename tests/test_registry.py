"""Unit tests for the ActionRegistry — guards, effects, unknown actions."""

import pytest
from carassist import (
    MODE_TUNING,
    ActionKind,
    ActionRegistry,
    ActionStatus,
    DoorPosition,
    DrivingMode,
    VehicleState,
)

DOOR_ACTIONS = [
    ("open_front_left_door", "close_front_left_door", DoorPosition.FRONT_LEFT, "fl"),
    ("open_front_right_door", "close_front_right_door", DoorPosition.FRONT_RIGHT, "fr"),
    ("open_rear_left_door", "close_rear_left_door", DoorPosition.REAR_LEFT, "rl"),
    ("open_rear_right_door", "close_rear_right_door", DoorPosition.REAR_RIGHT, "rr"),
]


class TestDoorGuards:
    @pytest.mark.parametrize("open_action,close_action,door,code", DOOR_ACTIONS)
    def test_open_twice_fires_once(self, registry, effects, open_action, close_action, door, code):
        first = registry.execute(open_action)
        second = registry.execute(open_action)

        assert first.status == ActionStatus.EXECUTED
        assert second.status == ActionStatus.NO_OP
        assert effects.count("animation", f"opendoor_{code}") == 1
        assert registry.state.is_door_open(door)

    @pytest.mark.parametrize("open_action,close_action,door,code", DOOR_ACTIONS)
    def test_close_without_open_is_noop(self, registry, effects, open_action, close_action, door, code):
        outcome = registry.execute(close_action)

        assert outcome.status == ActionStatus.NO_OP
        assert not outcome.fired
        assert effects.calls == []
        assert not registry.state.is_door_open(door)

    @pytest.mark.parametrize("open_action,close_action,door,code", DOOR_ACTIONS)
    def test_open_close_open_fires_each_transition(
        self, registry, effects, open_action, close_action, door, code
    ):
        registry.execute(open_action)
        registry.execute(close_action)
        registry.execute(open_action)

        assert effects.calls == [
            ("animation", f"opendoor_{code}"),
            ("animation", f"closedoor_{code}"),
            ("animation", f"opendoor_{code}"),
        ]
        assert registry.state.is_door_open(door)

    def test_doors_are_independent(self, registry):
        registry.execute("open_front_left_door")
        assert registry.state.open_doors() == [DoorPosition.FRONT_LEFT]
        registry.execute("open_rear_right_door")
        assert registry.state.open_doors() == [
            DoorPosition.FRONT_LEFT,
            DoorPosition.REAR_RIGHT,
        ]

    def test_noop_keeps_confirmation_message(self, registry):
        registry.execute("open_front_left_door")
        outcome = registry.execute("open_front_left_door")
        assert outcome.message == "Front left door opening..."


class TestAllDoors:
    def test_open_all_doors_in_rig_order(self, registry, effects):
        outcome = registry.execute(ActionKind.OPEN_ALL_DOORS)
        assert outcome.status == ActionStatus.EXECUTED
        assert effects.calls == [
            ("animation", "opendoor_fl"),
            ("animation", "opendoor_rr"),
            ("animation", "opendoor_rl"),
            ("animation", "opendoor_fr"),
        ]
        assert len(registry.state.open_doors()) == 4

    def test_open_all_skips_open_doors(self, registry, effects):
        registry.execute("open_rear_left_door")
        effects.calls.clear()
        registry.execute("open_all_doors")
        assert ("animation", "opendoor_rl") not in effects.calls
        assert len(effects.calls) == 3

    def test_close_all_when_closed_is_noop(self, registry, effects):
        outcome = registry.execute("close_all_doors")
        assert outcome.status == ActionStatus.NO_OP
        assert effects.calls == []

    def test_close_all_closes_open_doors(self, registry, effects):
        registry.execute("open_front_right_door")
        effects.calls.clear()
        outcome = registry.execute("close_all_doors")
        assert outcome.status == ActionStatus.EXECUTED
        assert effects.calls == [("animation", "closedoor_fr")]
        assert registry.state.open_doors() == []


class TestModes:
    def test_drift_mode_tuning(self, registry):
        registry.execute("set_drift_mode")
        tuning = registry.state.tuning
        assert tuning.acceleration == 7
        assert tuning.turn == 12
        assert tuning.downforce == 5
        assert tuning.max_speed == 110
        assert tuning.kart_like is True
        assert registry.state.mode == DrivingMode.DRIFT

    def test_drift_mode_reapplied(self, registry, effects):
        first = registry.execute("set_drift_mode")
        second = registry.execute("set_drift_mode")
        assert first.status == ActionStatus.EXECUTED
        assert second.status == ActionStatus.EXECUTED
        assert effects.count("tuning", MODE_TUNING[DrivingMode.DRIFT]) == 2

    def test_race_then_normal(self, registry):
        registry.execute("set_race_mode")
        assert registry.state.tuning.max_speed == 250
        assert registry.state.tuning.downforce == 15
        registry.execute("set_normal_mode")
        assert registry.state.mode == DrivingMode.NORMAL
        assert registry.state.tuning == MODE_TUNING[DrivingMode.NORMAL]


class TestEngineAndVents:
    def test_start_engine_reapplies(self, registry, effects):
        registry.execute("start_engine")
        registry.execute("start_engine")
        assert effects.count("engine", "start") == 2
        assert registry.state.engine_on

    def test_stop_engine(self, registry, effects):
        registry.execute("start_engine")
        registry.execute("stop_engine")
        assert not registry.state.engine_on
        assert effects.count("engine", "stop") == 1

    def test_vents_toggle(self, registry, effects):
        registry.execute("open_air_conditioner")
        assert registry.state.vents_on
        registry.execute("close_air_conditioner")
        registry.execute("close_air_conditioner")
        assert not registry.state.vents_on
        assert effects.calls == [("vents", "start"), ("vents", "stop"), ("vents", "stop")]


class TestUnknownAction:
    def test_unknown_does_not_raise(self, registry):
        outcome = registry.execute("launch_rockets")
        assert outcome.status == ActionStatus.UNKNOWN
        assert outcome.action == "launch_rockets"
        assert outcome.message is None

    def test_unknown_leaves_state_unchanged(self, registry, effects):
        registry.execute("open_front_left_door")
        registry.execute("set_race_mode")
        before = VehicleState(
            doors=dict(registry.state.doors),
            engine_on=registry.state.engine_on,
            vents_on=registry.state.vents_on,
            mode=registry.state.mode,
            tuning=registry.state.tuning,
        )
        calls_before = list(effects.calls)

        for name in ("", "OPEN_FRONT_LEFT_DOOR", "open_trunk", "set_drift_mode "):
            registry.execute(name)

        assert registry.state == before
        assert effects.calls == calls_before


class TestToolDefinitions:
    def test_every_handler_advertised(self, registry):
        names = [tool.function.name for tool in registry.tool_definitions()]
        assert names == [kind.value for kind in ActionKind]

    def test_empty_parameter_schema(self, registry):
        for tool in registry.tool_definitions():
            assert tool.type == "function"
            assert tool.function.parameters == {
                "type": "object",
                "properties": {},
                "required": [],
            }

    def test_shared_state(self, effects):
        state = VehicleState()
        registry = ActionRegistry(effects, state)
        registry.execute("start_engine")
        assert state.engine_on
