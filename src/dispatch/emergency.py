"""
Despacho de vehículos de emergencia.

En cada iteración se elige el carril con más vehículos de emergencia
(empates: menor índice, N < E < S < W) y se vacía desde el frente hasta
el último vehículo de emergencia de ese carril, inclusive. Los vehículos
regulares que estén delante salen en la misma pasada; los que estén
detrás del último de emergencia quedan en cola.

El ranking se recalcula desde cero en cada iteración, porque cada vaciado
cambia los conteos.
"""

import logging
from typing import List, Optional

from ..intersection.state import IntersectionState
from ..intersection.vehicle import Priority
from ..utils.config import DispatchConfig
from .report import CycleReport

logger = logging.getLogger(__name__)


class EmergencyDispatcher:
    """
    Vacía carriles con vehículos de emergencia hasta que no quede ninguno.
    """

    phase = DispatchConfig.EMERGENCY_PHASE

    def __init__(self, state: IntersectionState):
        """
        Args:
            state: Estado de la intersección a despachar
        """
        self.state = state

        # Estadísticas
        self.iterations = 0

    @staticmethod
    def rank_lanes(emergency_counts: List[int]) -> List[int]:
        """
        Ordena los índices de carril por conteo descendente e índice ascendente.

        Args:
            emergency_counts: Vehículos de emergencia por carril

        Returns:
            list: Índices de carril, de mayor a menor prioridad
        """
        return sorted(range(len(emergency_counts)),
                      key=lambda index: (-emergency_counts[index], index))

    def select_lane(self, emergency_counts: List[int]) -> Optional[int]:
        """
        Retorna el carril mejor rankeado con al menos un vehículo de emergencia.

        Returns:
            int o None si ningún carril tiene emergencias
        """
        for index in self.rank_lanes(emergency_counts):
            if emergency_counts[index] > 0:
                return index
        return None

    def drain_lane(self, lane_index: int, report: CycleReport) -> int:
        """
        Vacía un carril hasta su último vehículo de emergencia, inclusive.

        Args:
            lane_index: Índice del carril a vaciar
            report: Reporte del ciclo en curso

        Returns:
            int: Vehículos desencolados
        """
        lane = self.state.lanes[lane_index]
        last_emergency = lane.last_index_of(Priority.EMERGENCY)
        if last_emergency is None:
            return 0

        report.green_light(self.phase, lane.direction)
        logger.info("Green light for %s lane", lane.direction.label)

        for _ in range(last_emergency + 1):
            entry = self.state.dequeue(lane_index)
            report.record(entry, self.phase)

        return last_emergency + 1

    def run(self, report: CycleReport) -> int:
        """
        Despacha emergencias hasta que el contador llegue a cero.

        Args:
            report: Reporte del ciclo en curso

        Returns:
            int: Total de vehículos desencolados en esta fase
        """
        dequeued = 0

        while self.state.emergency_count > 0:
            counts = self.state.emergency_counts()

            if sum(counts) == 0:
                logger.warning("Contador de emergencias en %d sin emergencias en cola; se reinicia",
                               self.state.emergency_count)
                self.state.emergency_count = 0
                break

            lane_index = self.select_lane(counts)
            dequeued += self.drain_lane(lane_index, report)
            self.iterations += 1

        return dequeued
