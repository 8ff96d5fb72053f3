"""
Controlador de tráfico de la intersección.

Este módulo coordina un ciclo completo de despacho:
1. Emergencias: se vacían carriles hasta que no quede ningún vehículo de emergencia
2. Regulares: una pasada de drenaje parcial (70% con contención)
3. Barrido final: se vacía todo lo que quede, carril por carril

Al terminar un ciclo los cuatro carriles quedan vacíos.
"""

import logging
from typing import Dict, Tuple

from ..intersection.registry import VehicleRegistry
from ..intersection.state import IntersectionState
from ..intersection.vehicle import Direction, LogEntry, Vehicle
from ..utils.config import DispatchConfig
from .emergency import EmergencyDispatcher
from .regular import RegularDispatcher
from .report import CycleReport

logger = logging.getLogger(__name__)


class TrafficController:
    """
    Punto de entrada del núcleo para la consola y los scripts.

    Es dueño del estado de la intersección (carriles, contador de
    emergencias y registro) y lo comparte con el registro de vehículos
    y los despachadores. No es seguro para uso concurrente: un ciclo
    completo debe ejecutarse sin otras operaciones intercaladas.
    """

    def __init__(self, drain_ratio: float = DispatchConfig.REGULAR_DRAIN_RATIO):
        """
        Inicializa una intersección vacía.

        Args:
            drain_ratio: Fracción de regulares por pasada con contención
        """
        self.state = IntersectionState()
        self.registry = VehicleRegistry(self.state)
        self.emergency_dispatcher = EmergencyDispatcher(self.state)
        self.regular_dispatcher = RegularDispatcher(self.state, drain_ratio)

        # Estadísticas
        self.cycles_run = 0

    # ------------------------------------------------------------------
    # Interfaz para colaboradores
    # ------------------------------------------------------------------

    def admit_vehicle(self, vehicle_id, priority, direction) -> Vehicle:
        """
        Admite un vehículo en su carril.

        Args:
            vehicle_id: ID de 3 dígitos
            priority: 0/1 o Priority
            direction: N, E, S, W (sin distinguir mayúsculas) o Direction

        Returns:
            Vehicle: El vehículo encolado

        Raises:
            ValidationError: Si la entrada es rechazada
        """
        return self.registry.admit(vehicle_id, priority, direction)

    def vehicle_exists(self, vehicle_id: int) -> bool:
        return self.registry.exists(vehicle_id)

    def snapshot_lanes(self) -> Dict[Direction, Tuple[Vehicle, ...]]:
        """Contenido actual de los carriles, en orden N, E, S, W."""
        return self.state.snapshot()

    def read_log(self) -> Tuple[LogEntry, ...]:
        """Historial completo de vehículos procesados."""
        return self.state.log.entries()

    @property
    def emergency_count(self) -> int:
        return self.state.emergency_count

    def total_queued(self) -> int:
        return self.state.total_queued()

    # ------------------------------------------------------------------
    # Ciclo de despacho
    # ------------------------------------------------------------------

    def run_cycle(self) -> CycleReport:
        """
        Ejecuta un ciclo completo de despacho.

        Returns:
            CycleReport: Vehículos despachados en orden, con su fase
        """
        report = CycleReport()

        if self.state.is_empty():
            logger.info("NO VEHICLES IN ANY LANE.")
            return report

        logger.info("ALL LANES ARE RED")

        emergency = self.emergency_dispatcher.run(report)
        regular = self.regular_dispatcher.run(report)
        swept = self._sweep(report)

        self.cycles_run += 1
        logger.info("✓ Ciclo %d completado: %d emergencia, %d regular, %d barrido",
                    self.cycles_run, emergency, regular, swept)
        return report

    def _sweep(self, report: CycleReport) -> int:
        """Vacía por completo cada carril que todavía tenga vehículos."""
        phase = DispatchConfig.SWEEP_PHASE
        dequeued = 0

        for lane_index, lane in enumerate(self.state.lanes):
            if lane.is_empty():
                continue

            report.green_light(phase, lane.direction)
            logger.info("Green light for %s lane", lane.direction.label)

            while not lane.is_empty():
                report.record(self.state.dequeue(lane_index), phase)
                dequeued += 1

        return dequeued

    # ------------------------------------------------------------------
    # Presentación
    # ------------------------------------------------------------------

    def get_status_string(self) -> str:
        """
        Retorna el listado de vehículos por carril.

        Returns:
            str: Texto con un bloque por carril
        """
        lines = []
        for direction, vehicles in self.snapshot_lanes().items():
            lines.append(f"{direction.label} Lane:")
            if not vehicles:
                lines.append("NO VEHICLES IN THIS LANE.")
            for vehicle in vehicles:
                lines.append(f"  {vehicle}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TrafficController({self.state!r}, cycles={self.cycles_run})"
