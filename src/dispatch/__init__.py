"""
Algoritmos de despacho de la intersección.

Este módulo contiene las tres fases de un ciclo y su coordinación:
- EmergencyDispatcher: vacía carriles con vehículos de emergencia
- RegularDispatcher: drenaje parcial (70%) de vehículos regulares
- TrafficController: emergencias, regulares y barrido final
"""

from .report import CycleReport, DispatchEvent
from .emergency import EmergencyDispatcher
from .regular import RegularDispatcher
from .controller import TrafficController

__all__ = [
    'CycleReport',
    'DispatchEvent',
    'EmergencyDispatcher',
    'RegularDispatcher',
    'TrafficController'
]
