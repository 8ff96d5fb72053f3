"""
Despacho parcial de vehículos regulares.

Cada carril, en orden N, E, S, W, deja salir a todos sus vehículos
regulares salvo que otro carril tenga vehículos esperando: en ese caso
solo sale el piso del 70% (con más de un regular en cola).
"""

import logging
import math

from ..intersection.state import IntersectionState
from ..intersection.vehicle import Priority
from ..utils.config import DispatchConfig
from .report import CycleReport

logger = logging.getLogger(__name__)


class RegularDispatcher:
    """
    Pasada única de drenaje parcial sobre los cuatro carriles.
    """

    phase = DispatchConfig.REGULAR_PHASE

    def __init__(self, state: IntersectionState,
                 drain_ratio: float = DispatchConfig.REGULAR_DRAIN_RATIO):
        """
        Args:
            state: Estado de la intersección a despachar
            drain_ratio: Fracción de regulares que sale con contención (0, 1]
        """
        if not 0.0 < drain_ratio <= 1.0:
            raise ValueError(f"Ratio de drenaje inválido: {drain_ratio} (debe estar en (0, 1])")

        self.state = state
        self.drain_ratio = drain_ratio

    def allowed_dequeues(self, regular_count: int, contention: bool) -> int:
        """
        Calcula cuántos vehículos pueden salir del carril en esta pasada.

        Con más de un regular y contención, sale el piso de
        regular_count * drain_ratio (2 -> 1, 3 -> 2). En otro caso salen todos.

        Args:
            regular_count: Vehículos regulares en el carril
            contention: True si otro carril tiene vehículos

        Returns:
            int: Máximo de vehículos a desencolar
        """
        if regular_count > 1 and contention:
            return math.floor(regular_count * self.drain_ratio)
        return regular_count

    def run(self, report: CycleReport) -> int:
        """
        Ejecuta la pasada regular.

        Args:
            report: Reporte del ciclo en curso

        Returns:
            int: Total de vehículos desencolados en esta fase
        """
        dequeued = 0

        for lane_index, lane in enumerate(self.state.lanes):
            if lane.is_empty():
                continue

            report.green_light(self.phase, lane.direction)
            logger.info("Green light for %s lane", lane.direction.label)

            regular_count = lane.count_priority(Priority.REGULAR)
            contention = self.state.other_lanes_occupied(lane_index)
            allowed = self.allowed_dequeues(regular_count, contention)

            # Drenaje FIFO puro: no filtra por prioridad
            lane_dequeued = 0
            while not lane.is_empty() and lane_dequeued < allowed:
                entry = self.state.dequeue(lane_index)
                report.record(entry, self.phase)
                lane_dequeued += 1

            dequeued += lane_dequeued

            if not lane.is_empty():
                report.defer(lane.direction)
                logger.warning("Remaining vehicles in %s lane will be dequeued in the next turn.",
                               lane.direction.label)

        return dequeued
