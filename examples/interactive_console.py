"""
Consola interactiva del controlador de intersección.

Menú:
1. Create Traffic: ingresar vehículos como "ID PRIORIDAD DIRECCIÓN" ($ para terminar)
2. Display All Vehicles
3. Manage Traffic
4. Traffic Log
$ para salir.
"""

import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.dispatch import TrafficController
from src.intersection import ValidationError
from src.utils.config import configure_logging

# Colores ANSI
BLUE = "\033[1;34m"
GREY = "\033[1;30m"
RED = "\033[1;31m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"


def colorize(line: str) -> str:
    """Aplica el color de consola según el tipo de línea."""
    if line.startswith("Green light"):
        return f"{GREEN}{line}{RESET}"
    if line.startswith("Remaining"):
        return f"{YELLOW}{line}{RESET}"
    if line.startswith("ALL LANES ARE RED"):
        return f"{RED}{line}{RESET}"
    if line.startswith("NO VEHICLES"):
        return f"{GREY}{line}{RESET}"
    return line


def parse_arrival(line: str):
    """
    Separa una línea "ID PRIORIDAD DIRECCIÓN".

    Returns:
        tuple: (id, prioridad, dirección) con id y prioridad como enteros

    Raises:
        ValueError: Si la línea no tiene tres campos o no son numéricos
    """
    fields = line.split()
    if len(fields) != 3:
        raise ValueError("Expected: ID PRIORITY DIRECTION")
    return int(fields[0]), int(fields[1]), fields[2]


def create_traffic(controller: TrafficController):
    """Lee vehículos hasta recibir '$'."""
    while True:
        line = input("Enter Vehicle ID (3-digit), Priority (0 or 1), and "
                     "Direction (N, E, S, W) or '$' to stop: ").strip()
        if line == "$":
            break

        try:
            controller.admit_vehicle(*parse_arrival(line))
        except (ValidationError, ValueError) as error:
            print(f"{GREY}WARNING: {error}{RESET}")


def print_lines(text: str):
    for line in text.splitlines():
        print(colorize(line))


def main():
    """Bucle principal del menú."""
    configure_logging("ERROR")
    controller = TrafficController()

    while True:
        print(f"{BLUE}\nMENU:")
        print("1. Create Traffic")
        print("2. Display All Vehicles")
        print("3. Manage Traffic")
        print("4. Traffic Log")
        print("Press $ to exit.")
        choice = input(f"Enter your choice: {RESET}").strip()

        if choice == "$":
            print(f"{GREY}EXITING...\n{RESET}")
            break

        if choice == "1":
            create_traffic(controller)
        elif choice == "2":
            print_lines(controller.get_status_string())
        elif choice == "3":
            print_lines(controller.run_cycle().get_status_string())
        elif choice == "4":
            log = controller.read_log()
            if not log:
                print(f"{GREY}NO VEHICLES IN TRAFFIC LOG.{RESET}")
            for entry in log:
                print(entry)
        else:
            print(f"{GREY}Invalid choice. Please try again.{RESET}")


if __name__ == "__main__":
    main()
