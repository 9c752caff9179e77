"""
Estimator boundary for the contact-aided invariant EKF
Interface, initial state and a call-recording implementation
"""

from .robot_state import RobotState, NoiseParams
from .interface import Estimator
from .recording import RecordingEstimator, EstimatorCall

__all__ = [
    'RobotState',
    'NoiseParams',
    'Estimator',
    'RecordingEstimator',
    'EstimatorCall'
]
