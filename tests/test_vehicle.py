"""
Tests para el módulo de vehículos (Vehicle).
"""

import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.intersection.vehicle import Vehicle, LogEntry, Priority, Direction
from src.intersection.errors import InvalidPriorityError, InvalidDirectionError, ValidationError


class TestPriority:
    """Tests para la enumeración Priority."""

    def test_parse_integers(self):
        """Test de conversión desde 0/1."""
        assert Priority.parse(0) is Priority.REGULAR
        assert Priority.parse(1) is Priority.EMERGENCY

    def test_parse_enum_passthrough(self):
        assert Priority.parse(Priority.EMERGENCY) is Priority.EMERGENCY

    @pytest.mark.parametrize("value", [2, -1, "1", None, 1.0, True])
    def test_parse_invalid(self, value):
        """Test de prioridades inválidas."""
        with pytest.raises(InvalidPriorityError) as excinfo:
            Priority.parse(value)

        assert excinfo.value.value == value
        assert isinstance(excinfo.value, ValidationError)

    def test_labels(self):
        assert Priority.REGULAR.label == "Regular"
        assert Priority.EMERGENCY.label == "Emergency"


class TestDirection:
    """Tests para la enumeración Direction."""

    def test_lane_indices(self):
        """Test del mapeo fijo dirección -> índice."""
        assert [d.index for d in Direction] == [0, 1, 2, 3]
        assert Direction.NORTH.index == 0
        assert Direction.WEST.index == 3

    def test_from_index(self):
        for direction in Direction:
            assert Direction.from_index(direction.index) is direction

    @pytest.mark.parametrize("token,expected", [
        ("N", Direction.NORTH),
        ("e", Direction.EAST),
        (" s ", Direction.SOUTH),
        ("w", Direction.WEST),
    ])
    def test_parse_case_insensitive(self, token, expected):
        """Test de tokens sin distinguir mayúsculas."""
        assert Direction.parse(token) is expected

    @pytest.mark.parametrize("token", ["X", "", "NE", "North", 0, None])
    def test_parse_invalid(self, token):
        with pytest.raises(InvalidDirectionError):
            Direction.parse(token)

    def test_labels(self):
        assert [d.label for d in Direction] == ["North", "East", "South", "West"]


class TestVehicle:
    """Tests para la clase Vehicle."""

    def test_vehicle_creation(self):
        """Test de creación básica de vehículo."""
        vehicle = Vehicle(101, Priority.EMERGENCY, Direction.NORTH)

        assert vehicle.id == 101
        assert vehicle.priority is Priority.EMERGENCY
        assert vehicle.direction is Direction.NORTH
        assert vehicle.is_emergency()

    def test_vehicle_is_read_only(self):
        """Test de inmutabilidad."""
        vehicle = Vehicle(101, Priority.REGULAR, Direction.EAST)

        with pytest.raises(AttributeError):
            vehicle.id = 102

        with pytest.raises(AttributeError):
            vehicle.priority = Priority.EMERGENCY

    def test_equality(self):
        assert Vehicle(101, Priority.REGULAR, Direction.EAST) == \
            Vehicle(101, Priority.REGULAR, Direction.EAST)
        assert Vehicle(101, Priority.REGULAR, Direction.EAST) != \
            Vehicle(101, Priority.REGULAR, Direction.WEST)

    def test_string_representation(self):
        vehicle = Vehicle(555, Priority.REGULAR, Direction.SOUTH)
        assert str(vehicle) == "Vehicle ID: 555, Priority: Regular"


class TestLogEntry:
    """Tests para la clase LogEntry."""

    def test_copy_from_vehicle(self):
        """Test de copia independiente del vehículo."""
        vehicle = Vehicle(310, Priority.EMERGENCY, Direction.WEST)
        entry = LogEntry.from_vehicle(vehicle)

        assert entry.id == 310
        assert entry.priority is Priority.EMERGENCY
        assert entry.direction is Direction.WEST
        assert entry is not vehicle

        del vehicle
        assert entry.id == 310

    def test_to_dict(self):
        entry = LogEntry(120, Priority.REGULAR, Direction.NORTH)

        assert entry.to_dict() == {
            'vehicle_id': 120,
            'priority': 'Regular',
            'direction': 'N'
        }

    def test_string_representation(self):
        entry = LogEntry(120, Priority.EMERGENCY, Direction.EAST)
        assert str(entry) == "Vehicle ID: 120, Direction: E, Priority: Emergency"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
