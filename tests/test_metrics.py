"""
Tests para la calculadora de métricas.
"""

import math

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.dispatch import TrafficController
from src.intersection import Priority
from src.utils.metrics import MetricsCalculator


@pytest.fixture
def contended_cycle():
    """Ciclo con 3 regulares en N, 1 en E y una emergencia en W."""
    controller = TrafficController()
    for arrival in [(101, 0, 'N'), (102, 0, 'N'), (103, 0, 'N'),
                    (201, 0, 'E'), (401, 1, 'W')]:
        controller.admit_vehicle(*arrival)

    report = controller.run_cycle()
    return controller, report


class TestMetricsCalculator:
    """Tests para la clase MetricsCalculator."""

    def test_log_to_dataframe(self, contended_cycle):
        controller, _ = contended_cycle

        df = MetricsCalculator.log_to_dataframe(controller.read_log())

        assert list(df.columns) == ['position', 'vehicle_id', 'priority', 'direction']
        assert list(df['vehicle_id']) == [401, 101, 102, 201, 103]
        assert list(df['position']) == [0, 1, 2, 3, 4]

    def test_empty_log_dataframe(self):
        df = MetricsCalculator.log_to_dataframe([])

        assert df.empty
        assert 'vehicle_id' in df.columns

    def test_report_to_dataframe(self, contended_cycle):
        _, report = contended_cycle

        df = MetricsCalculator.report_to_dataframe(report)

        assert list(df['phase']) == ['emergency', 'regular', 'regular', 'regular', 'sweep']

    def test_lane_throughput(self, contended_cycle):
        controller, _ = contended_cycle

        throughput = MetricsCalculator.lane_throughput(controller.read_log())

        assert throughput == {'N': 3, 'E': 1, 'S': 0, 'W': 1}

    def test_priority_counts_and_share(self, contended_cycle):
        controller, _ = contended_cycle
        log = controller.read_log()

        assert MetricsCalculator.priority_counts(log) == {'Regular': 4, 'Emergency': 1}
        assert MetricsCalculator.emergency_share(log) == pytest.approx(0.2)
        assert MetricsCalculator.emergency_share([]) == 0.0

    def test_average_dispatch_position(self, contended_cycle):
        """Test de posición media de salida por prioridad."""
        controller, _ = contended_cycle
        log = controller.read_log()

        assert MetricsCalculator.average_dispatch_position(log, Priority.EMERGENCY) == 0.0
        assert MetricsCalculator.average_dispatch_position(log, Priority.REGULAR) == 2.5
        assert MetricsCalculator.average_dispatch_position(log) == 2.0
        assert math.isnan(MetricsCalculator.average_dispatch_position([], Priority.REGULAR))

    def test_phase_summary(self, contended_cycle):
        """Test de tabla fase x carril."""
        _, report = contended_cycle

        summary = MetricsCalculator.phase_summary(report)

        assert list(summary.index) == ['emergency', 'regular', 'sweep']
        assert list(summary.columns) == ['N', 'E', 'S', 'W']
        assert summary.loc['emergency', 'W'] == 1
        assert summary.loc['regular', 'N'] == 2
        assert summary.loc['regular', 'E'] == 1
        assert summary.loc['sweep', 'N'] == 1
        assert int(summary.values.sum()) == 5

    def test_phase_summary_empty_cycle(self):
        report = TrafficController().run_cycle()

        summary = MetricsCalculator.phase_summary(report)

        assert summary.shape == (3, 4)
        assert int(summary.values.sum()) == 0

    def test_create_summary_dataframe(self, contended_cycle):
        controller, first = contended_cycle
        controller.admit_vehicle(301, 0, 'S')
        second = controller.run_cycle()

        df = MetricsCalculator.create_summary_dataframe([first, second])

        assert list(df['Cycle']) == [1, 2]
        assert list(df['Vehicles']) == [5, 1]
        assert list(df['Emergency']) == [1, 0]
        assert list(df['Sweep']) == [1, 0]
        assert list(df['Deferred Lanes']) == [1, 0]

    def test_plot_lane_throughput(self, contended_cycle, tmp_path):
        """Test de generación del gráfico."""
        controller, _ = contended_cycle
        output = tmp_path / "throughput.png"

        fig = MetricsCalculator.plot_lane_throughput(controller.read_log(),
                                                     save_path=str(output))

        assert output.exists()
        assert len(fig.axes[0].patches) == 8
        plt.close(fig)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
