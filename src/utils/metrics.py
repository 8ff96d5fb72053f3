"""
Sistema de métricas y análisis del despacho.

Este módulo proporciona funciones para analizar el registro de vehículos
procesados y los reportes de ciclo.
"""

from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .config import DispatchConfig, IntersectionConfig, VisualizationConfig

LOG_COLUMNS = ['position', 'vehicle_id', 'priority', 'direction']


class MetricsCalculator:
    """
    Calculadora de métricas sobre el registro y los reportes de ciclo.

    Proporciona métodos estáticos; las entradas son secuencias de LogEntry
    (TrafficController.read_log()) o CycleReport.
    """

    @staticmethod
    def log_to_dataframe(entries: Sequence) -> pd.DataFrame:
        """
        Convierte el registro en un DataFrame.

        Args:
            entries: Secuencia de LogEntry en orden de salida

        Returns:
            pd.DataFrame: Una fila por vehículo, con su posición de salida
        """
        rows = []
        for position, entry in enumerate(entries):
            row = entry.to_dict()
            row['position'] = position
            rows.append(row)

        return pd.DataFrame(rows, columns=LOG_COLUMNS)

    @staticmethod
    def report_to_dataframe(report) -> pd.DataFrame:
        """
        Convierte un CycleReport en un DataFrame con la fase de cada salida.

        Args:
            report: CycleReport

        Returns:
            pd.DataFrame: Columnas del registro más 'phase'
        """
        rows = []
        for position, event in enumerate(report.events):
            row = event.to_dict()
            row['position'] = position
            rows.append(row)

        return pd.DataFrame(rows, columns=LOG_COLUMNS + ['phase'])

    @staticmethod
    def lane_throughput(entries: Sequence) -> Dict[str, int]:
        """
        Cuenta vehículos despachados por carril.

        Args:
            entries: Secuencia de LogEntry

        Returns:
            dict: {token de dirección: vehículos}, siempre con los cuatro carriles
        """
        throughput = {token: 0 for token in IntersectionConfig.DIRECTION_TOKENS}
        for entry in entries:
            throughput[entry.direction.value] += 1
        return throughput

    @staticmethod
    def priority_counts(entries: Sequence) -> Dict[str, int]:
        """
        Cuenta vehículos despachados por prioridad.

        Returns:
            dict: {'Regular': n, 'Emergency': m}
        """
        counts = {'Regular': 0, 'Emergency': 0}
        for entry in entries:
            counts[entry.priority.label] += 1
        return counts

    @staticmethod
    def emergency_share(entries: Sequence) -> float:
        """
        Calcula la fracción de vehículos de emergencia en el registro.

        Returns:
            float: Fracción entre 0 y 1 (0 si el registro está vacío)
        """
        if not entries:
            return 0.0

        flags = np.array([entry.priority.label == 'Emergency' for entry in entries])
        return float(flags.mean())

    @staticmethod
    def average_dispatch_position(entries: Sequence, priority=None) -> float:
        """
        Posición media de salida (0 = primero), opcionalmente por prioridad.

        Un valor bajo para emergencias indica que salieron antes que el resto.

        Args:
            entries: Secuencia de LogEntry
            priority: Priority a filtrar (None = todas)

        Returns:
            float: Posición media, o NaN si no hay vehículos que cumplan el filtro
        """
        positions = [position for position, entry in enumerate(entries)
                     if priority is None or entry.priority is priority]
        if not positions:
            return float('nan')

        return float(np.mean(positions))

    @staticmethod
    def phase_summary(report) -> pd.DataFrame:
        """
        Tabla de vehículos despachados por fase y carril.

        Args:
            report: CycleReport

        Returns:
            pd.DataFrame: Índice = fase (en orden de ejecución), columnas = N, E, S, W
        """
        df = MetricsCalculator.report_to_dataframe(report)

        summary = pd.crosstab(df['phase'], df['direction']) if not df.empty else pd.DataFrame()
        summary = summary.reindex(index=DispatchConfig.PHASES,
                                  columns=IntersectionConfig.DIRECTION_TOKENS,
                                  fill_value=0)
        return summary.fillna(0).astype(int)

    @staticmethod
    def create_summary_dataframe(reports: List) -> pd.DataFrame:
        """
        Crea un DataFrame con resumen de varios ciclos.

        Args:
            reports: Lista de CycleReport, en orden de ejecución

        Returns:
            pd.DataFrame: Una fila por ciclo
        """
        data = []

        for cycle, report in enumerate(reports, start=1):
            entries = [event.entry for event in report.events]
            data.append({
                'Cycle': cycle,
                'Vehicles': len(report),
                'Emergency': len(report.events_for_phase(DispatchConfig.EMERGENCY_PHASE)),
                'Regular Pass': len(report.events_for_phase(DispatchConfig.REGULAR_PHASE)),
                'Sweep': len(report.events_for_phase(DispatchConfig.SWEEP_PHASE)),
                'Deferred Lanes': len(report.deferred_lanes),
                'Emergency Share': MetricsCalculator.emergency_share(entries)
            })

        return pd.DataFrame(data)

    @staticmethod
    def plot_lane_throughput(entries: Sequence, save_path: Optional[str] = None,
                             title: str = "Vehículos despachados por carril"):
        """
        Grafica vehículos despachados por carril, apilados por prioridad.

        Args:
            entries: Secuencia de LogEntry
            save_path: Ruta donde guardar la figura (None = mostrar)
            title: Título del gráfico

        Returns:
            matplotlib.figure.Figure: La figura creada
        """
        df = MetricsCalculator.log_to_dataframe(entries)
        tokens = IntersectionConfig.DIRECTION_TOKENS
        labels = IntersectionConfig.DIRECTION_NAMES

        fig, ax = plt.subplots(figsize=VisualizationConfig.FIGURE_SIZE)

        bottom = np.zeros(len(tokens))
        for priority_label, color in VisualizationConfig.PRIORITY_COLORS.items():
            subset = df[df['priority'] == priority_label]
            heights = np.array([(subset['direction'] == token).sum() for token in tokens])
            ax.bar(labels, heights, bottom=bottom, color=color, label=priority_label)
            bottom += heights

        ax.set_title(title)
        ax.set_xlabel("Carril")
        ax.set_ylabel("Vehículos")
        ax.legend()
        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=VisualizationConfig.DPI,
                        format=VisualizationConfig.SAVE_FORMAT)
            print(f"✓ Gráfico guardado en: {save_path}")
        else:
            plt.show()

        return fig


if __name__ == "__main__":
    # Ejecutar como: python -m src.utils.metrics
    from ..dispatch import TrafficController

    print("="*70)
    print("EJEMPLO: Calculadora de Métricas")
    print("="*70)

    controller = TrafficController()
    for vehicle_id, priority, direction in [(101, 0, 'N'), (102, 1, 'N'), (103, 0, 'N'),
                                            (201, 0, 'E'), (202, 0, 'E'), (203, 1, 'W')]:
        controller.admit_vehicle(vehicle_id, priority, direction)

    report = controller.run_cycle()
    log = controller.read_log()

    calc = MetricsCalculator()

    print("\nMétricas calculadas:")
    print(f"  Vehículos despachados:  {len(log)}")
    print(f"  Fracción emergencia:    {calc.emergency_share(log):.2f}")
    print(f"  Por carril:             {calc.lane_throughput(log)}")
    print("\nResumen por fase:")
    print(calc.phase_summary(report).to_string())
