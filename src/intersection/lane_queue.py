"""
Cola FIFO de vehículos para un carril de la intersección.
"""

from collections import deque
from typing import Iterator, Optional, Tuple

from .errors import EmptyQueueError
from .vehicle import Direction, Priority, Vehicle


class LaneQueue:
    """
    Cola de vehículos pendientes de un carril.

    El orden de inserción es el orden de llegada. Solo se agrega por el
    final y solo se quita por el frente.
    """

    def __init__(self, direction: Direction):
        """
        Inicializa un carril vacío.

        Args:
            direction: Dirección que atiende el carril
        """
        self.direction = direction
        self._vehicles = deque()

    def enqueue(self, vehicle: Vehicle):
        """Agrega un vehículo al final de la cola."""
        self._vehicles.append(vehicle)

    def dequeue_front(self) -> Vehicle:
        """
        Quita y retorna el vehículo del frente.

        Raises:
            EmptyQueueError: Si el carril está vacío
        """
        if not self._vehicles:
            raise EmptyQueueError(f"Carril {self.direction.label} vacío")
        return self._vehicles.popleft()

    def peek_all(self) -> Iterator[Vehicle]:
        """
        Recorre los vehículos en cola sin quitarlos.

        Cada llamada retorna un iterador nuevo desde el frente.
        """
        return iter(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return self.peek_all()

    def is_empty(self) -> bool:
        return not self._vehicles

    def count(self) -> int:
        return len(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def count_priority(self, priority: Priority) -> int:
        """Cuenta los vehículos de una prioridad en el carril."""
        return sum(1 for vehicle in self._vehicles if vehicle.priority is priority)

    def last_index_of(self, priority: Priority) -> Optional[int]:
        """
        Posición (desde el frente) del último vehículo con esa prioridad.

        Returns:
            int o None si no hay ninguno
        """
        last = None
        for position, vehicle in enumerate(self._vehicles):
            if vehicle.priority is priority:
                last = position
        return last

    def contains_id(self, vehicle_id: int) -> bool:
        return any(vehicle.id == vehicle_id for vehicle in self._vehicles)

    def snapshot(self) -> Tuple[Vehicle, ...]:
        """Copia inmutable del contenido actual."""
        return tuple(self._vehicles)

    def __str__(self) -> str:
        return f"LaneQueue({self.direction.label}, {len(self._vehicles)} vehículos)"

    def __repr__(self) -> str:
        ids = [vehicle.id for vehicle in self._vehicles]
        return f"LaneQueue(direction={self.direction.value}, vehicles={ids})"
