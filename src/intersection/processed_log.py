"""
Registro de vehículos procesados.

Guarda, en orden de salida, una copia de cada vehículo desencolado durante
toda la ejecución. Solo admite agregar al final.
"""

from typing import Iterator, List, Tuple

from .vehicle import LogEntry, Priority, Vehicle


class ProcessedLog:
    """Registro append-only de vehículos desencolados."""

    def __init__(self):
        self._entries: List[LogEntry] = []

    def append(self, vehicle: Vehicle) -> LogEntry:
        """
        Registra la salida de un vehículo.

        Args:
            vehicle: Vehículo recién desencolado

        Returns:
            LogEntry: Copia guardada en el registro
        """
        entry = LogEntry.from_vehicle(vehicle)
        self._entries.append(entry)
        return entry

    def entries(self) -> Tuple[LogEntry, ...]:
        """Historial completo en orden de inserción (solo lectura)."""
        return tuple(self._entries)

    def ids(self) -> List[int]:
        return [entry.id for entry in self._entries]

    def count_priority(self, priority: Priority) -> int:
        return sum(1 for entry in self._entries if entry.priority is priority)

    def is_empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        if not self._entries:
            return "NO VEHICLES IN TRAFFIC LOG."
        return "\n".join(str(entry) for entry in self._entries)
