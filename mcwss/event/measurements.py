"""Measurements sent along with events."""

from __future__ import annotations

from dataclasses import dataclass

from mcwss.rawjson import json_field


@dataclass
class Measurements:
    """The measurements object of an event.

    Most events only fill the first four fields; the travelled event fills the
    others as well.
    """

    count: int = json_field("count", 0, int)
    record_count: int = json_field("recordCnt", 0, int)
    sequence_max: int = json_field("seqMax", 0, int)
    sequence_min: int = json_field("seqMin", 0, int)
    metres_travelled: float = json_field("MetersTravelled", 0.0, float)
    new_biome: int = json_field("NewBiome", 0, int)
    position_average_x: float = json_field("PosAvgX", 0.0, float)
    position_average_y: float = json_field("PosAvgY", 0.0, float)
    position_average_z: float = json_field("PosAvgZ", 0.0, float)


class Measurable:
    """Mixin for events that carry information in the measurements object."""

    measurements: Measurements

    def consume_measurements(self, measurements: Measurements) -> None:
        """Store the measurements sent with the event."""
        if not isinstance(measurements, Measurements):
            raise TypeError(
                f"expected Measurements, got {type(measurements).__name__}"
            )
        self.measurements = measurements