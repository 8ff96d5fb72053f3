"""
Script de ejemplo: Ciclos de despacho en una intersección de cuatro carriles

Este script demuestra cómo usar el controlador para admitir vehículos,
ejecutar ciclos y analizar el registro resultante.
"""

import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.dispatch import TrafficController
from src.intersection import Priority, TrafficGenerator, ValidationError
from src.utils.config import RESULTS_DIR, configure_logging, ensure_directories
from src.utils.metrics import MetricsCalculator


def run_scenario(name, arrivals):
    """
    Admite un lote de vehículos y ejecuta un ciclo.

    Args:
        name: Nombre del escenario
        arrivals: Lista de tuplas (id, prioridad, dirección)

    Returns:
        tuple: (controlador, reporte del ciclo)
    """
    print("\n" + "="*70)
    print(f"ESCENARIO: {name}")
    print("="*70)

    controller = TrafficController()
    for vehicle_id, priority, direction in arrivals:
        try:
            controller.admit_vehicle(vehicle_id, priority, direction)
        except ValidationError as error:
            print(f"  ✗ ({vehicle_id}, {priority}, {direction}) rechazado: {error}")

    print(controller.get_status_string())
    print()

    report = controller.run_cycle()
    print(report.get_status_string())
    print(f"\nOrden de salida: {report.vehicle_ids()}")

    return controller, report


def run_random_batches(cycles=3, vehicles_per_cycle=20):
    """Ejecuta varios ciclos con llegadas aleatorias y resume los resultados."""
    print("\n" + "="*70)
    print(f"LLEGADAS ALEATORIAS - {cycles} ciclos de {vehicles_per_cycle} vehículos")
    print("="*70)

    controller = TrafficController()
    generator = TrafficGenerator(seed=42)

    reports = []
    for _ in range(cycles):
        generator.populate(controller, vehicles_per_cycle)
        reports.append(controller.run_cycle())

    calc = MetricsCalculator()
    log = controller.read_log()

    print(calc.create_summary_dataframe(reports).to_string(index=False))
    print(f"\nPosición media de salida (emergencia): "
          f"{calc.average_dispatch_position(log, Priority.EMERGENCY):.1f}")
    print(f"Posición media de salida (regular):    "
          f"{calc.average_dispatch_position(log, Priority.REGULAR):.1f}")
    print("\nÚltimo ciclo por fase y carril:")
    print(calc.phase_summary(reports[-1]).to_string())

    ensure_directories()
    calc.plot_lane_throughput(log, save_path=str(RESULTS_DIR / "lane_throughput.png"))


def main():
    """Función principal del ejemplo."""
    configure_logging("WARNING")

    print("="*70)
    print("EJEMPLO COMPLETO DE DESPACHO EN INTERSECCIÓN")
    print("="*70)

    # 1. Emergencia en medio de un carril: sale todo lo que tiene delante
    run_scenario("Emergencia en carril Norte",
                 [(101, 0, 'N'), (102, 1, 'N'), (103, 0, 'N')])

    # 2. Un solo carril ocupado: sin contención, salen todos
    run_scenario("Carril Norte sin contención",
                 [(101, 0, 'N'), (102, 0, 'N'), (103, 0, 'N')])

    # 3. Contención: Norte deja salir floor(3 * 0.7) = 2
    run_scenario("Norte con contención de Este",
                 [(101, 0, 'N'), (102, 0, 'N'), (103, 0, 'N'), (201, 0, 'E')])

    # 4. Entradas inválidas
    run_scenario("Validación de entradas",
                 [(200, 0, 'n'), (200, 1, 'S'), (99, 0, 'E'), (300, 2, 'W'), (301, 0, 'X')])

    # 5. Varios ciclos aleatorios
    run_random_batches()

    print("\n" + "="*70)
    print("EJEMPLO COMPLETADO")
    print("="*70)


if __name__ == "__main__":
    main()
