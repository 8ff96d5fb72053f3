"""
Tests para los carriles (LaneQueue) y el registro de procesados (ProcessedLog).
"""

import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.intersection.lane_queue import LaneQueue
from src.intersection.processed_log import ProcessedLog
from src.intersection.vehicle import Vehicle, Priority, Direction
from src.intersection.errors import EmptyQueueError


def make_vehicle(vehicle_id, priority=Priority.REGULAR, direction=Direction.NORTH):
    return Vehicle(vehicle_id, priority, direction)


class TestLaneQueue:
    """Tests para la clase LaneQueue."""

    def test_empty_lane(self):
        """Test de carril recién creado."""
        lane = LaneQueue(Direction.NORTH)

        assert lane.is_empty()
        assert lane.count() == 0
        assert len(lane) == 0
        assert list(lane.peek_all()) == []

    def test_fifo_order(self):
        """Test de orden de llegada."""
        lane = LaneQueue(Direction.NORTH)
        for vehicle_id in (101, 102, 103):
            lane.enqueue(make_vehicle(vehicle_id))

        assert lane.count() == 3
        assert lane.dequeue_front().id == 101
        assert lane.dequeue_front().id == 102
        assert lane.dequeue_front().id == 103
        assert lane.is_empty()

    def test_dequeue_empty_raises(self):
        """Test de desencolar carril vacío."""
        lane = LaneQueue(Direction.EAST)

        with pytest.raises(EmptyQueueError):
            lane.dequeue_front()

    def test_peek_all_is_restartable_and_read_only(self):
        """Test de recorrido sin modificar la cola."""
        lane = LaneQueue(Direction.SOUTH)
        lane.enqueue(make_vehicle(101))
        lane.enqueue(make_vehicle(102))

        first = [v.id for v in lane.peek_all()]
        second = [v.id for v in lane.peek_all()]

        assert first == second == [101, 102]
        assert lane.count() == 2
        assert [v.id for v in lane] == [101, 102]

    def test_count_priority(self):
        lane = LaneQueue(Direction.NORTH)
        lane.enqueue(make_vehicle(101))
        lane.enqueue(make_vehicle(102, Priority.EMERGENCY))
        lane.enqueue(make_vehicle(103))

        assert lane.count_priority(Priority.REGULAR) == 2
        assert lane.count_priority(Priority.EMERGENCY) == 1

    def test_last_index_of(self):
        """Test de posición del último vehículo de emergencia."""
        lane = LaneQueue(Direction.NORTH)
        assert lane.last_index_of(Priority.EMERGENCY) is None

        lane.enqueue(make_vehicle(101, Priority.EMERGENCY))
        lane.enqueue(make_vehicle(102))
        lane.enqueue(make_vehicle(103, Priority.EMERGENCY))
        lane.enqueue(make_vehicle(104))

        assert lane.last_index_of(Priority.EMERGENCY) == 2
        assert lane.last_index_of(Priority.REGULAR) == 3

    def test_contains_id(self):
        lane = LaneQueue(Direction.WEST)
        lane.enqueue(make_vehicle(150))

        assert lane.contains_id(150)
        assert not lane.contains_id(151)

    def test_snapshot_is_a_copy(self):
        """Test de snapshot independiente del carril."""
        lane = LaneQueue(Direction.NORTH)
        lane.enqueue(make_vehicle(101))

        snapshot = lane.snapshot()
        lane.dequeue_front()

        assert isinstance(snapshot, tuple)
        assert [v.id for v in snapshot] == [101]
        assert lane.is_empty()


class TestProcessedLog:
    """Tests para la clase ProcessedLog."""

    def test_append_keeps_order(self):
        """Test de orden de inserción."""
        log = ProcessedLog()
        for vehicle_id in (103, 101, 102):
            log.append(make_vehicle(vehicle_id))

        assert log.ids() == [103, 101, 102]
        assert len(log) == 3

    def test_entries_are_copies(self):
        """Test de entradas independientes del vehículo original."""
        log = ProcessedLog()
        vehicle = make_vehicle(101, Priority.EMERGENCY, Direction.EAST)

        entry = log.append(vehicle)
        del vehicle

        assert entry.id == 101
        assert log.entries()[0] == entry

    def test_entries_are_read_only(self):
        log = ProcessedLog()
        log.append(make_vehicle(101))

        entries = log.entries()
        assert isinstance(entries, tuple)

        with pytest.raises(AttributeError):
            entries.append(None)

    def test_count_priority(self):
        log = ProcessedLog()
        log.append(make_vehicle(101))
        log.append(make_vehicle(102, Priority.EMERGENCY))

        assert log.count_priority(Priority.EMERGENCY) == 1
        assert log.count_priority(Priority.REGULAR) == 1

    def test_empty_log_string(self):
        log = ProcessedLog()

        assert log.is_empty()
        assert str(log) == "NO VEHICLES IN TRAFFIC LOG."


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
