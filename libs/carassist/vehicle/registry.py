"""ActionRegistry — executes catalogue actions against the guarded vehicle state."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from carassist.models.conversation import ToolDefinition
from carassist.models.messages import ActionStatus
from carassist.vehicle.actions import ACTIONS, ActionKind, tool_definitions
from carassist.vehicle.effects import LoggingVehicleEffects, VehicleEffects
from carassist.vehicle.state import MODE_TUNING, DoorPosition, DrivingMode, VehicleState

logger = logging.getLogger(__name__)

# Order the original vehicle rig uses when operating every door at once
ALL_DOORS_ORDER: tuple[DoorPosition, ...] = (
    DoorPosition.FRONT_LEFT,
    DoorPosition.REAR_RIGHT,
    DoorPosition.REAR_LEFT,
    DoorPosition.FRONT_RIGHT,
)


@dataclass(frozen=True)
class ActionOutcome:
    """Result of one execute() call."""

    action: str
    status: ActionStatus
    message: str | None = None

    @property
    def fired(self) -> bool:
        """True if a side effect was performed."""
        return self.status == ActionStatus.EXECUTED


class ActionRegistry:
    """Owns the vehicle state and the only code path that performs effects.

    Door actions are guarded: opening an open door or closing a closed one
    does nothing. Mode, engine and vent actions re-apply every time.
    """

    def __init__(
        self,
        effects: VehicleEffects | None = None,
        state: VehicleState | None = None,
    ) -> None:
        self._effects = effects or LoggingVehicleEffects()
        self._state = state or VehicleState()
        self._handlers: dict[str, Callable[[], bool]] = {
            ActionKind.OPEN_FRONT_LEFT_DOOR: lambda: self.open_door(DoorPosition.FRONT_LEFT),
            ActionKind.OPEN_FRONT_RIGHT_DOOR: lambda: self.open_door(DoorPosition.FRONT_RIGHT),
            ActionKind.OPEN_REAR_LEFT_DOOR: lambda: self.open_door(DoorPosition.REAR_LEFT),
            ActionKind.OPEN_REAR_RIGHT_DOOR: lambda: self.open_door(DoorPosition.REAR_RIGHT),
            ActionKind.CLOSE_FRONT_LEFT_DOOR: lambda: self.close_door(DoorPosition.FRONT_LEFT),
            ActionKind.CLOSE_FRONT_RIGHT_DOOR: lambda: self.close_door(DoorPosition.FRONT_RIGHT),
            ActionKind.CLOSE_REAR_LEFT_DOOR: lambda: self.close_door(DoorPosition.REAR_LEFT),
            ActionKind.CLOSE_REAR_RIGHT_DOOR: lambda: self.close_door(DoorPosition.REAR_RIGHT),
            ActionKind.OPEN_ALL_DOORS: self.open_all_doors,
            ActionKind.CLOSE_ALL_DOORS: self.close_all_doors,
            ActionKind.START_ENGINE: self.start_engine,
            ActionKind.STOP_ENGINE: self.stop_engine,
            ActionKind.SET_DRIFT_MODE: lambda: self.set_mode(DrivingMode.DRIFT),
            ActionKind.SET_NORMAL_MODE: lambda: self.set_mode(DrivingMode.NORMAL),
            ActionKind.SET_RACE_MODE: lambda: self.set_mode(DrivingMode.RACE),
            ActionKind.OPEN_AIR_CONDITIONER: self.open_vents,
            ActionKind.CLOSE_AIR_CONDITIONER: self.close_vents,
        }

    @property
    def state(self) -> VehicleState:
        return self._state

    def tool_definitions(self) -> list[ToolDefinition]:
        """Actions this registry can run, as tool definitions for the reasoning service."""
        return [tool for tool in tool_definitions() if tool.function.name in self._handlers]

    def execute(self, identifier: str) -> ActionOutcome:
        """Run one action by identifier.

        Unknown identifiers are logged and reported as UNKNOWN; they never
        raise and never touch the vehicle state.
        """
        handler = self._handlers.get(identifier)
        if handler is None:
            logger.warning("Unknown action: %s", identifier)
            return ActionOutcome(action=identifier, status=ActionStatus.UNKNOWN)

        message = ACTIONS[identifier].message
        if handler():
            logger.info("Executed %s", identifier)
            return ActionOutcome(identifier, ActionStatus.EXECUTED, message)

        logger.debug("%s left state unchanged", identifier)
        return ActionOutcome(identifier, ActionStatus.NO_OP, message)

    # --- Guarded door actions ---

    def open_door(self, door: DoorPosition) -> bool:
        """Open a door. Returns False if it was already open."""
        if self._state.is_door_open(door):
            return False
        self._effects.trigger_animation(f"opendoor_{door.short_code}")
        self._state.doors[door] = True
        return True

    def close_door(self, door: DoorPosition) -> bool:
        """Close a door. Returns False if it was already closed."""
        if not self._state.is_door_open(door):
            return False
        self._effects.trigger_animation(f"closedoor_{door.short_code}")
        self._state.doors[door] = False
        return True

    def open_all_doors(self) -> bool:
        """Open every closed door. Returns True if at least one moved."""
        results = [self.open_door(door) for door in ALL_DOORS_ORDER]
        return any(results)

    def close_all_doors(self) -> bool:
        """Close every open door. Returns True if at least one moved."""
        results = [self.close_door(door) for door in ALL_DOORS_ORDER]
        return any(results)

    # --- Unguarded actions ---

    def set_mode(self, mode: DrivingMode) -> bool:
        tuning = MODE_TUNING[mode]
        self._effects.apply_tuning(tuning)
        self._state.mode = mode
        self._state.tuning = tuning
        return True

    def start_engine(self) -> bool:
        self._effects.start_engine()
        self._state.engine_on = True
        return True

    def stop_engine(self) -> bool:
        self._effects.stop_engine()
        self._state.engine_on = False
        return True

    def open_vents(self) -> bool:
        self._effects.start_vents()
        self._state.vents_on = True
        return True

    def close_vents(self) -> bool:
        self._effects.stop_vents()
        self._state.vents_on = False
        return True
