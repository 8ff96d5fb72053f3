"""
Modelo de la intersección.

Este módulo contiene las estructuras que despachan los controladores:
- Vehículos, prioridades y direcciones
- Carriles como colas FIFO
- Registro de vehículos procesados
- Validación y alta de vehículos
- Generación aleatoria de llegadas
"""

from .errors import (
    ValidationError, InvalidIdError, InvalidPriorityError,
    InvalidDirectionError, DuplicateIdError, EmptyQueueError
)
from .vehicle import Vehicle, LogEntry, Priority, Direction
from .lane_queue import LaneQueue
from .processed_log import ProcessedLog
from .state import IntersectionState
from .registry import VehicleRegistry
from .traffic_generator import TrafficGenerator

__all__ = [
    'ValidationError',
    'InvalidIdError',
    'InvalidPriorityError',
    'InvalidDirectionError',
    'DuplicateIdError',
    'EmptyQueueError',
    'Vehicle',
    'LogEntry',
    'Priority',
    'Direction',
    'LaneQueue',
    'ProcessedLog',
    'IntersectionState',
    'VehicleRegistry',
    'TrafficGenerator'
]
