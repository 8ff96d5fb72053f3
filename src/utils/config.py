"""
Configuración global del sistema de despacho de la intersección.

Este módulo contiene todas las constantes y parámetros de configuración
utilizados en el proyecto.
"""

import logging
import os
from pathlib import Path

# Rutas del proyecto
PROJECT_ROOT = Path(__file__).parent.parent.parent
RESULTS_DIR = PROJECT_ROOT / "experiments" / "results"


# Parámetros de la intersección
class IntersectionConfig:
    """Configuración de carriles y vehículos."""

    # Carriles: índice fijo por dirección (N=0, E=1, S=2, W=3)
    LANE_COUNT = 4
    DIRECTION_TOKENS = ["N", "E", "S", "W"]
    DIRECTION_NAMES = ["North", "East", "South", "West"]

    # Identificadores de vehículo (3 dígitos)
    MIN_VEHICLE_ID = 100
    MAX_VEHICLE_ID = 999

    # Prioridades (valores de entrada)
    REGULAR_PRIORITY = 0
    EMERGENCY_PRIORITY = 1


# Parámetros de despacho
class DispatchConfig:
    """Configuración de los despachadores."""

    # Fracción de vehículos regulares que sale por pasada con contención
    REGULAR_DRAIN_RATIO = 0.7

    # Fases de un ciclo, en orden de ejecución
    EMERGENCY_PHASE = "emergency"
    REGULAR_PHASE = "regular"
    SWEEP_PHASE = "sweep"
    PHASES = [EMERGENCY_PHASE, REGULAR_PHASE, SWEEP_PHASE]


# Parámetros del generador de tráfico
class TrafficGeneratorConfig:
    """Configuración del generador aleatorio de llegadas."""

    EMERGENCY_PROBABILITY = 0.15
    DIRECTION_WEIGHTS = [0.25, 0.25, 0.25, 0.25]  # N, E, S, W
    DEFAULT_SEED = 42


# Visualización
class VisualizationConfig:
    """Configuración de visualización."""

    FIGURE_SIZE = (10, 6)
    DPI = 100
    SAVE_FORMAT = "png"

    PRIORITY_COLORS = {
        "Regular": "#1f77b4",
        "Emergency": "#d62728"
    }

    PHASE_COLORS = {
        "emergency": "#d62728",
        "regular": "#2ca02c",
        "sweep": "#9467bd"
    }


# Logging
class LoggingConfig:
    """Configuración de logging."""

    LOG_LEVEL = os.environ.get("INTERSECTION_LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE = None  # p.ej. PROJECT_ROOT / "intersection.log"


def configure_logging(level: str = None, log_file=None):
    """
    Configura el logging raíz según LoggingConfig.

    Args:
        level: Nivel de logging (default: LoggingConfig.LOG_LEVEL)
        log_file: Archivo de salida opcional (default: LoggingConfig.LOG_FILE)
    """
    level = (level or LoggingConfig.LOG_LEVEL).upper()
    log_file = log_file or LoggingConfig.LOG_FILE

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LoggingConfig.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


# Crear directorios si no existen
def ensure_directories():
    """Crea los directorios necesarios si no existen."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":
    print(f"Directorio del proyecto: {PROJECT_ROOT}")
    print(f"Directorio de resultados: {RESULTS_DIR}")
    print(f"Ratio de drenaje regular: {DispatchConfig.REGULAR_DRAIN_RATIO}")
    ensure_directories()
    print("Directorios verificados/creados correctamente")
