"""
Registro de vehículos: validación de entrada y alta en los carriles.
"""

import logging

from ..utils.config import IntersectionConfig
from .errors import DuplicateIdError, InvalidIdError, ValidationError
from .state import IntersectionState
from .vehicle import Direction, Priority, Vehicle

logger = logging.getLogger(__name__)


class VehicleRegistry:
    """
    Admite vehículos en los carriles de una intersección.

    Un vehículo se rechaza si su ID no es de 3 dígitos, si la prioridad o
    la dirección no son válidas, o si el ID ya está en algún carril. Un
    rechazo no modifica el estado.
    """

    def __init__(self, state: IntersectionState):
        """
        Args:
            state: Estado de la intersección donde se encolan los vehículos
        """
        self.state = state

    def exists(self, vehicle_id: int) -> bool:
        """Verifica si algún carril tiene un vehículo con ese ID."""
        return self.state.contains_id(vehicle_id)

    def admit(self, vehicle_id, priority, direction) -> Vehicle:
        """
        Valida y encola un vehículo.

        Args:
            vehicle_id: ID de 3 dígitos (100-999)
            priority: Priority o 0 (regular) / 1 (emergencia)
            direction: Direction o token N, E, S, W (sin distinguir mayúsculas)

        Returns:
            Vehicle: El vehículo encolado

        Raises:
            InvalidIdError, InvalidPriorityError, InvalidDirectionError,
            DuplicateIdError: Según la primera regla que falle
        """
        try:
            self._validate_id(vehicle_id)
            priority = Priority.parse(priority)
            direction = Direction.parse(direction)
            if self.exists(vehicle_id):
                raise DuplicateIdError(
                    f"Vehicle with ID {vehicle_id} already exists. Enter a different ID.",
                    vehicle_id
                )
        except ValidationError as error:
            logger.warning("WARNING: %s", error)
            raise

        vehicle = Vehicle(vehicle_id, priority, direction)
        self.state.enqueue(vehicle)
        logger.debug("Vehículo %d encolado en carril %s (%s)",
                     vehicle_id, direction.label, priority.label)
        return vehicle

    @staticmethod
    def _validate_id(vehicle_id):
        if (not isinstance(vehicle_id, int) or isinstance(vehicle_id, bool) or
                not IntersectionConfig.MIN_VEHICLE_ID <= vehicle_id <= IntersectionConfig.MAX_VEHICLE_ID):
            raise InvalidIdError("Vehicle ID must be a 3-digit number.", vehicle_id)
