"""
Estado compartido de la intersección.

Agrupa los cuatro carriles, el contador de vehículos de emergencia y el
registro de procesados en un solo objeto, que el controlador crea y pasa
explícitamente al registro de vehículos y a los despachadores.
"""

import logging
from typing import Dict, List, Tuple

from .lane_queue import LaneQueue
from .processed_log import ProcessedLog
from .vehicle import Direction, LogEntry, Priority, Vehicle

logger = logging.getLogger(__name__)


class IntersectionState:
    """
    Carriles, contador de emergencias y registro de una intersección.

    Invariante: emergency_count es igual a la suma de vehículos de
    emergencia en los cuatro carriles.
    """

    def __init__(self):
        self.lanes: List[LaneQueue] = [LaneQueue(direction) for direction in Direction]
        self.log = ProcessedLog()
        self.emergency_count = 0

    def lane(self, direction: Direction) -> LaneQueue:
        return self.lanes[direction.index]

    def enqueue(self, vehicle: Vehicle):
        """Agrega un vehículo a su carril y actualiza el contador."""
        self.lane(vehicle.direction).enqueue(vehicle)
        if vehicle.is_emergency():
            self.emergency_count += 1

    def dequeue(self, lane_index: int) -> LogEntry:
        """
        Desencola el frente de un carril y lo registra.

        Es la única vía de salida de vehículos: mantiene el contador de
        emergencias y el registro consistentes con los carriles.

        Args:
            lane_index: Índice del carril (0=N, 1=E, 2=S, 3=W)

        Returns:
            LogEntry: Entrada agregada al registro

        Raises:
            EmptyQueueError: Si el carril está vacío
        """
        vehicle = self.lanes[lane_index].dequeue_front()
        if vehicle.is_emergency():
            self.emergency_count -= 1
        entry = self.log.append(vehicle)
        logger.debug("  %s", vehicle)
        return entry

    def emergency_counts(self) -> List[int]:
        """Vehículos de emergencia por carril, en orden de índice."""
        return [lane.count_priority(Priority.EMERGENCY) for lane in self.lanes]

    def total_queued(self) -> int:
        return sum(lane.count() for lane in self.lanes)

    def is_empty(self) -> bool:
        return all(lane.is_empty() for lane in self.lanes)

    def other_lanes_occupied(self, lane_index: int) -> bool:
        """Verifica si algún carril distinto de lane_index tiene vehículos."""
        return any(not lane.is_empty()
                   for index, lane in enumerate(self.lanes) if index != lane_index)

    def contains_id(self, vehicle_id: int) -> bool:
        return any(lane.contains_id(vehicle_id) for lane in self.lanes)

    def snapshot(self) -> Dict[Direction, Tuple[Vehicle, ...]]:
        """Contenido de cada carril, en orden N, E, S, W."""
        return {lane.direction: lane.snapshot() for lane in self.lanes}

    def __repr__(self) -> str:
        counts = {lane.direction.value: lane.count() for lane in self.lanes}
        return f"IntersectionState(lanes={counts}, emergency={self.emergency_count}, logged={len(self.log)})"
