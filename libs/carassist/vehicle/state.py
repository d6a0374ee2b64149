"""VehicleState — guarded vehicle state owned by the action registry."""

from dataclasses import dataclass, field
from enum import StrEnum

from carassist.models.messages import VehicleStatus


class DoorPosition(StrEnum):
    """The four doors of the car."""

    FRONT_LEFT = "front_left"
    FRONT_RIGHT = "front_right"
    REAR_LEFT = "rear_left"
    REAR_RIGHT = "rear_right"

    @property
    def short_code(self) -> str:
        """Two-letter code used by animation triggers (e.g. `fl`)."""
        front, side = self.value.split("_")
        return front[0] + side[0]


class DrivingMode(StrEnum):
    """Driving modes the assistant can switch between."""

    NORMAL = "normal"
    DRIFT = "drift"
    RACE = "race"


@dataclass(frozen=True)
class ModeTuning:
    """Handling parameters written to the vehicle controller for a mode."""

    acceleration: float
    turn: float
    downforce: float
    max_speed: float
    kart_like: bool


MODE_TUNING: dict[DrivingMode, ModeTuning] = {
    DrivingMode.NORMAL: ModeTuning(
        acceleration=3, turn=4, downforce=5, max_speed=100, kart_like=False
    ),
    DrivingMode.DRIFT: ModeTuning(
        acceleration=7, turn=12, downforce=5, max_speed=110, kart_like=True
    ),
    DrivingMode.RACE: ModeTuning(
        acceleration=5, turn=5, downforce=15, max_speed=250, kart_like=False
    ),
}


@dataclass
class VehicleState:
    """Door guards plus the engine, vent and mode flags shown on the dashboard."""

    doors: dict[DoorPosition, bool] = field(
        default_factory=lambda: {door: False for door in DoorPosition}
    )
    engine_on: bool = False
    vents_on: bool = False
    mode: DrivingMode = DrivingMode.NORMAL
    tuning: ModeTuning = MODE_TUNING[DrivingMode.NORMAL]

    def is_door_open(self, door: DoorPosition) -> bool:
        return self.doors.get(door, False)

    def open_doors(self) -> list[DoorPosition]:
        """Doors currently open, in catalogue order."""
        return [door for door in DoorPosition if self.is_door_open(door)]

    def to_status(self) -> VehicleStatus:
        """Build the dashboard status payload."""
        return VehicleStatus(
            doors={door.value: self.is_door_open(door) for door in DoorPosition},
            engine_on=self.engine_on,
            vents_on=self.vents_on,
            mode=self.mode.value,
            acceleration=self.tuning.acceleration,
            turn=self.tuning.turn,
            downforce=self.tuning.downforce,
            max_speed=self.tuning.max_speed,
            kart_like=self.tuning.kart_like,
        )
