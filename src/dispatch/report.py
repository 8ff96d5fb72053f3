"""
Reporte de un ciclo de despacho.

Un CycleReport guarda, en orden, cada vehículo desencolado junto con la
fase que lo despachó, las luces verdes otorgadas y los carriles que
quedaron diferidos tras la pasada regular.
"""

from typing import List, Tuple

from ..intersection.vehicle import Direction, LogEntry, Priority


class DispatchEvent:
    """Salida de un vehículo durante un ciclo."""

    __slots__ = ("entry", "phase")

    def __init__(self, entry: LogEntry, phase: str):
        self.entry = entry
        self.phase = phase

    @property
    def vehicle_id(self) -> int:
        return self.entry.id

    @property
    def priority(self) -> Priority:
        return self.entry.priority

    @property
    def direction(self) -> Direction:
        return self.entry.direction

    def to_dict(self) -> dict:
        data = self.entry.to_dict()
        data['phase'] = self.phase
        return data

    def __repr__(self) -> str:
        return f"DispatchEvent({self.entry!r}, phase={self.phase})"


class CycleReport:
    """Resultado de TrafficController.run_cycle()."""

    def __init__(self):
        self.events: List[DispatchEvent] = []
        self.green_lights: List[Tuple[str, Direction]] = []
        self.deferred_lanes: List[Direction] = []

        # (posición en events, texto) para reconstruir la salida de consola
        self._notices: List[Tuple[int, str]] = []

    @property
    def was_empty(self) -> bool:
        """True si el ciclo no encontró vehículos en ningún carril."""
        return not self.events

    def record(self, entry: LogEntry, phase: str):
        self.events.append(DispatchEvent(entry, phase))

    def green_light(self, phase: str, direction: Direction):
        self.green_lights.append((phase, direction))
        self._notices.append((len(self.events), f"Green light for {direction.label} lane"))

    def defer(self, direction: Direction):
        self.deferred_lanes.append(direction)
        self._notices.append((len(self.events),
                              f"Remaining vehicles in {direction.label} lane "
                              f"will be dequeued in the next turn."))

    def vehicle_ids(self) -> List[int]:
        return [event.vehicle_id for event in self.events]

    def events_for_phase(self, phase: str) -> List[DispatchEvent]:
        return [event for event in self.events if event.phase == phase]

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def get_status_string(self) -> str:
        """
        Representación del ciclo como la muestra la consola.

        Returns:
            str: Luces verdes, vehículos despachados y carriles diferidos, en orden
        """
        if self.was_empty:
            return "NO VEHICLES IN ANY LANE."

        lines = ["ALL LANES ARE RED"]
        notices = iter(self._notices)
        pending = next(notices, None)

        for position, event in enumerate(self.events):
            while pending is not None and pending[0] == position:
                lines.append(pending[1])
                pending = next(notices, None)
            lines.append(f"  Vehicle ID: {event.vehicle_id}, Priority: {event.priority.label}")

        while pending is not None:
            lines.append(pending[1])
            pending = next(notices, None)

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"CycleReport(events={len(self.events)}, "
                f"green_lights={len(self.green_lights)}, "
                f"deferred={[d.value for d in self.deferred_lanes]})")
