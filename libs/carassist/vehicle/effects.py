"""Vehicle effects port — the registry's only way to touch the simulation."""

import logging
from typing import Protocol, runtime_checkable

from carassist.vehicle.state import ModeTuning

logger = logging.getLogger(__name__)


@runtime_checkable
class VehicleEffects(Protocol):
    """Interface for the vehicle/animation subsystem."""

    def trigger_animation(self, trigger: str) -> None: ...
    def apply_tuning(self, tuning: ModeTuning) -> None: ...
    def start_engine(self) -> None: ...
    def stop_engine(self) -> None: ...
    def start_vents(self) -> None: ...
    def stop_vents(self) -> None: ...


class LoggingVehicleEffects:
    """Headless effects: logs what a simulator would do. Implements VehicleEffects."""

    def trigger_animation(self, trigger: str) -> None:
        logger.info("Animation trigger: %s", trigger)

    def apply_tuning(self, tuning: ModeTuning) -> None:
        logger.info(
            "Tuning: acceleration=%s turn=%s downforce=%s max_speed=%s kart_like=%s",
            tuning.acceleration,
            tuning.turn,
            tuning.downforce,
            tuning.max_speed,
            tuning.kart_like,
        )

    def start_engine(self) -> None:
        logger.info("Engine sound playing")

    def stop_engine(self) -> None:
        logger.info("Engine off")

    def start_vents(self) -> None:
        logger.info("Vent air flowing")

    def stop_vents(self) -> None:
        logger.info("Vent air stopped")
