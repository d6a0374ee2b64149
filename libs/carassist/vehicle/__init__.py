"""Vehicle SDK — action catalogue, guarded state and the action registry."""

from carassist.vehicle.actions import (
    ACTIONS,
    ActionKind,
    ActionSpec,
    get_action,
    is_valid_action,
    tool_definitions,
)
from carassist.vehicle.effects import LoggingVehicleEffects, VehicleEffects
from carassist.vehicle.registry import ActionOutcome, ActionRegistry
from carassist.vehicle.state import (
    MODE_TUNING,
    DoorPosition,
    DrivingMode,
    ModeTuning,
    VehicleState,
)

__all__ = [
    "ACTIONS",
    "ActionKind",
    "ActionOutcome",
    "ActionRegistry",
    "ActionSpec",
    "DoorPosition",
    "DrivingMode",
    "LoggingVehicleEffects",
    "MODE_TUNING",
    "ModeTuning",
    "VehicleEffects",
    "VehicleState",
    "get_action",
    "is_valid_action",
    "tool_definitions",
]
