"""
Modelo de vehículo en espera en la intersección.

Este módulo define las prioridades y direcciones válidas, el vehículo
(inmutable una vez creado) y la entrada de registro que se genera al
desencolarlo.
"""

from enum import Enum

from ..utils.config import IntersectionConfig
from .errors import InvalidDirectionError, InvalidPriorityError


class Priority(Enum):
    """Clases de vehículo."""
    REGULAR = 0
    EMERGENCY = 1

    @property
    def label(self) -> str:
        return "Emergency" if self is Priority.EMERGENCY else "Regular"

    @classmethod
    def parse(cls, value) -> "Priority":
        """
        Convierte un valor de entrada (Priority o 0/1) en Priority.

        Raises:
            InvalidPriorityError: Si el valor no es una prioridad válida
        """
        if isinstance(value, Priority):
            return value
        # bool es subclase de int, pero True/False no son prioridades
        if isinstance(value, int) and not isinstance(value, bool):
            for priority in cls:
                if priority.value == value:
                    return priority
        raise InvalidPriorityError(
            f"Priority must be {IntersectionConfig.REGULAR_PRIORITY} "
            f"or {IntersectionConfig.EMERGENCY_PRIORITY}.", value
        )


class Direction(Enum):
    """Direcciones de llegada. El orden de declaración es el índice del carril."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def index(self) -> int:
        return IntersectionConfig.DIRECTION_TOKENS.index(self.value)

    @property
    def label(self) -> str:
        return IntersectionConfig.DIRECTION_NAMES[self.index]

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        return cls(IntersectionConfig.DIRECTION_TOKENS[index])

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Convierte un token (N, E, S, W, sin distinguir mayúsculas) en Direction.

        Raises:
            InvalidDirectionError: Si el token no es una dirección válida
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            token = value.strip().upper()
            if token in IntersectionConfig.DIRECTION_TOKENS:
                return cls(token)
        raise InvalidDirectionError("Invalid direction. Use N, S, E, W only.", value)


class Vehicle:
    """
    Vehículo en cola en uno de los cuatro carriles.

    Los atributos son de solo lectura: un vehículo no cambia mientras
    está en cola, y al salir se copia al registro como LogEntry.
    """

    __slots__ = ("_id", "_priority", "_direction")

    def __init__(self, vehicle_id: int, priority: Priority, direction: Direction):
        """
        Inicializa un vehículo.

        Args:
            vehicle_id: ID de 3 dígitos (ya validado por el registro)
            priority: Prioridad del vehículo
            direction: Carril por el que llega
        """
        self._id = vehicle_id
        self._priority = priority
        self._direction = direction

    @property
    def id(self) -> int:
        return self._id

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def direction(self) -> Direction:
        return self._direction

    def is_emergency(self) -> bool:
        """Verifica si el vehículo es de emergencia."""
        return self._priority is Priority.EMERGENCY

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vehicle):
            return NotImplemented
        return (self._id, self._priority, self._direction) == \
            (other._id, other._priority, other._direction)

    def __hash__(self) -> int:
        return hash((self._id, self._priority, self._direction))

    def __str__(self) -> str:
        return f"Vehicle ID: {self._id}, Priority: {self._priority.label}"

    def __repr__(self) -> str:
        return (f"Vehicle(id={self._id}, priority={self._priority.label}, "
                f"direction={self._direction.value})")


class LogEntry:
    """Copia inmutable de un vehículo desencolado."""

    __slots__ = ("_id", "_priority", "_direction")

    def __init__(self, vehicle_id: int, priority: Priority, direction: Direction):
        self._id = vehicle_id
        self._priority = priority
        self._direction = direction

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "LogEntry":
        return cls(vehicle.id, vehicle.priority, vehicle.direction)

    @property
    def id(self) -> int:
        return self._id

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def direction(self) -> Direction:
        return self._direction

    def to_dict(self) -> dict:
        return {
            'vehicle_id': self._id,
            'priority': self._priority.label,
            'direction': self._direction.value
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, LogEntry):
            return NotImplemented
        return (self._id, self._priority, self._direction) == \
            (other._id, other._priority, other._direction)

    def __hash__(self) -> int:
        return hash((self._id, self._priority, self._direction))

    def __str__(self) -> str:
        return (f"Vehicle ID: {self._id}, Direction: {self._direction.value}, "
                f"Priority: {self._priority.label}")

    def __repr__(self) -> str:
        return (f"LogEntry(id={self._id}, priority={self._priority.label}, "
                f"direction={self._direction.value})")
