"""Action catalogue — every vehicle action the assistant can request."""

from enum import StrEnum

from pydantic import BaseModel

from carassist.errors import UnknownActionError
from carassist.models.conversation import FunctionDefinition, ToolDefinition


class ActionKind(StrEnum):
    """All action identifiers the reasoning service may select."""

    OPEN_FRONT_LEFT_DOOR = "open_front_left_door"
    OPEN_FRONT_RIGHT_DOOR = "open_front_right_door"
    OPEN_REAR_LEFT_DOOR = "open_rear_left_door"
    OPEN_REAR_RIGHT_DOOR = "open_rear_right_door"
    CLOSE_FRONT_LEFT_DOOR = "close_front_left_door"
    CLOSE_FRONT_RIGHT_DOOR = "close_front_right_door"
    CLOSE_REAR_LEFT_DOOR = "close_rear_left_door"
    CLOSE_REAR_RIGHT_DOOR = "close_rear_right_door"
    OPEN_ALL_DOORS = "open_all_doors"
    CLOSE_ALL_DOORS = "close_all_doors"
    START_ENGINE = "start_engine"
    STOP_ENGINE = "stop_engine"
    SET_DRIFT_MODE = "set_drift_mode"
    SET_NORMAL_MODE = "set_normal_mode"
    SET_RACE_MODE = "set_race_mode"
    OPEN_AIR_CONDITIONER = "open_air_conditioner"
    CLOSE_AIR_CONDITIONER = "close_air_conditioner"


class ActionSpec(BaseModel):
    """A catalogue entry: what the reasoning service sees plus the display text."""

    name: ActionKind
    description: str
    message: str

    def to_tool(self) -> ToolDefinition:
        return ToolDefinition(
            function=FunctionDefinition(name=self.name.value, description=self.description)
        )


def _spec(name: ActionKind, description: str, message: str) -> ActionSpec:
    return ActionSpec(name=name, description=description, message=message)


# --- Catalogue ---

ACTIONS: dict[str, ActionSpec] = {
    spec.name.value: spec
    for spec in (
        _spec(
            ActionKind.OPEN_FRONT_LEFT_DOOR,
            "Opens the front left door specifically",
            "Front left door opening...",
        ),
        _spec(
            ActionKind.OPEN_FRONT_RIGHT_DOOR,
            "Opens the front right door specifically",
            "Front right door opening...",
        ),
        _spec(
            ActionKind.OPEN_REAR_LEFT_DOOR,
            "Opens the rear left door specifically",
            "Rear left door opening...",
        ),
        _spec(
            ActionKind.OPEN_REAR_RIGHT_DOOR,
            "Opens the rear right door specifically",
            "Rear right door opening...",
        ),
        _spec(
            ActionKind.CLOSE_FRONT_LEFT_DOOR,
            "Closes the front left door specifically",
            "Front left door closing...",
        ),
        _spec(
            ActionKind.CLOSE_FRONT_RIGHT_DOOR,
            "Closes the front right door specifically",
            "Front right door closing...",
        ),
        _spec(
            ActionKind.CLOSE_REAR_LEFT_DOOR,
            "Closes the rear left door specifically",
            "Rear left door closing...",
        ),
        _spec(
            ActionKind.CLOSE_REAR_RIGHT_DOOR,
            "Closes the rear right door specifically",
            "Rear right door closing...",
        ),
        _spec(
            ActionKind.OPEN_ALL_DOORS,
            "Opens all four doors of the car",
            "Opening all doors...",
        ),
        _spec(
            ActionKind.CLOSE_ALL_DOORS,
            "Closes all four doors of the car",
            "Closing all doors...",
        ),
        _spec(ActionKind.START_ENGINE, "Starts the car engine", "Engine starting..."),
        _spec(ActionKind.STOP_ENGINE, "Stops the car engine", "Engine stopping..."),
        _spec(
            ActionKind.SET_DRIFT_MODE,
            "Changes the car driving mode to drift mode for enhanced drifting capabilities",
            "Switching to DRIFT mode...",
        ),
        _spec(
            ActionKind.SET_NORMAL_MODE,
            "Changes the car driving mode to normal mode for regular driving",
            "Switching to NORMAL driving mode...",
        ),
        _spec(
            ActionKind.SET_RACE_MODE,
            "Changes the car driving mode to race mode for maximum performance",
            "Switching to RACE mode...",
        ),
        _spec(
            ActionKind.OPEN_AIR_CONDITIONER,
            "Turns on the air conditioning system",
            "Air conditioner turned ON...",
        ),
        _spec(
            ActionKind.CLOSE_AIR_CONDITIONER,
            "Turns off the air conditioning system",
            "Air conditioner turned OFF...",
        ),
    )
}


def is_valid_action(name: str) -> bool:
    """Check if an action identifier exists in the catalogue."""
    return name in ACTIONS


def get_action(name: str) -> ActionSpec:
    """Look up a catalogue entry.

    Raises:
        UnknownActionError: If the identifier is not in the catalogue.
    """
    spec = ACTIONS.get(name)
    if spec is None:
        raise UnknownActionError(name)
    return spec


def tool_definitions() -> list[ToolDefinition]:
    """The whole catalogue as reasoning-service tool definitions, in order."""
    return [spec.to_tool() for spec in ACTIONS.values()]
