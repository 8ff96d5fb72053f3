"""
Generador aleatorio de llegadas a la intersección.

Produce lotes de vehículos con IDs únicos, una proporción configurable de
vehículos de emergencia y carriles sorteados según pesos por dirección.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..utils.config import IntersectionConfig, TrafficGeneratorConfig
from .vehicle import Direction, Priority, Vehicle

logger = logging.getLogger(__name__)


class TrafficGenerator:
    """
    Genera llegadas de vehículos reproducibles a partir de una semilla.
    """

    def __init__(self, seed: Optional[int] = TrafficGeneratorConfig.DEFAULT_SEED,
                 emergency_probability: float = TrafficGeneratorConfig.EMERGENCY_PROBABILITY,
                 direction_weights: Optional[List[float]] = None):
        """
        Inicializa el generador.

        Args:
            seed: Semilla del generador aleatorio (None = no reproducible)
            emergency_probability: Probabilidad de que un vehículo sea de emergencia
            direction_weights: Pesos relativos de N, E, S, W
        """
        if not 0.0 <= emergency_probability <= 1.0:
            raise ValueError(f"Probabilidad de emergencia inválida: {emergency_probability}")

        weights = np.asarray(direction_weights or TrafficGeneratorConfig.DIRECTION_WEIGHTS,
                             dtype=float)
        if weights.shape != (IntersectionConfig.LANE_COUNT,) or weights.sum() <= 0 or (weights < 0).any():
            raise ValueError(f"Pesos de dirección inválidos: {direction_weights}")

        self.emergency_probability = emergency_probability
        self.direction_weights = weights / weights.sum()
        self.random_state = np.random.RandomState(seed)
        self.total_vehicles_generated = 0

    def generate_arrivals(self, count: int,
                          excluded_ids=()) -> List[Tuple[int, Priority, Direction]]:
        """
        Sortea un lote de llegadas.

        Args:
            count: Número de vehículos a generar
            excluded_ids: IDs que no deben usarse (p.ej. ya en cola)

        Returns:
            list: Tuplas (id, prioridad, dirección)
        """
        pool = np.setdiff1d(
            np.arange(IntersectionConfig.MIN_VEHICLE_ID, IntersectionConfig.MAX_VEHICLE_ID + 1),
            np.asarray(list(excluded_ids), dtype=int)
        )
        if count > len(pool):
            raise ValueError(f"Solo quedan {len(pool)} IDs libres, se pidieron {count}")

        ids = self.random_state.choice(pool, size=count, replace=False)
        emergencies = self.random_state.random_sample(count) < self.emergency_probability
        lanes = self.random_state.choice(IntersectionConfig.LANE_COUNT, size=count,
                                         p=self.direction_weights)

        arrivals = []
        for vehicle_id, is_emergency, lane_index in zip(ids, emergencies, lanes):
            priority = Priority.EMERGENCY if is_emergency else Priority.REGULAR
            arrivals.append((int(vehicle_id), priority, Direction.from_index(int(lane_index))))

        self.total_vehicles_generated += count
        return arrivals

    def populate(self, controller, count: int) -> List[Vehicle]:
        """
        Genera un lote y lo admite en el controlador.

        Args:
            controller: TrafficController donde encolar
            count: Número de vehículos

        Returns:
            list: Vehículos admitidos
        """
        queued_ids = [vehicle.id
                      for lane in controller.snapshot_lanes().values()
                      for vehicle in lane]
        arrivals = self.generate_arrivals(count, excluded_ids=queued_ids)
        admitted = [controller.admit_vehicle(*arrival) for arrival in arrivals]

        logger.info("✓ %d vehículos generados (%d de emergencia)", len(admitted),
                    sum(1 for vehicle in admitted if vehicle.is_emergency()))
        return admitted
