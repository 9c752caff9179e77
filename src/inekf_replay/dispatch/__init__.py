"""Log replay: temporal gating and measurement dispatch"""

from .temporal_gate import TemporalGate, TemporalGateConfig
from .dispatcher import MeasurementDispatcher, DispatchReport

__all__ = [
    'TemporalGate',
    'TemporalGateConfig',
    'MeasurementDispatcher',
    'DispatchReport'
]
