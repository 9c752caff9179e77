#!/usr/bin/env python3
"""
Recording estimator
Logs every call it receives without estimating anything
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..measurements.records import ImuSample, KinematicEntry
from .interface import Estimator
from .robot_state import NoiseParams, RobotState


@dataclass
class EstimatorCall:
    """One call made on the estimator"""
    name: str
    args: Tuple[Any, ...]


class RecordingEstimator(Estimator):
    """
    Estimator double for dry runs and tests

    The state never moves: get_state returns the initial state. Calls are
    kept in order in `calls`.
    """

    def __init__(self):
        self.calls: List[EstimatorCall] = []
        self.contacts: List[Tuple[int, bool]] = []
        self._state = RobotState.default()
        self._noise_params = NoiseParams()

    def initialize(self, state: RobotState, noise_params: NoiseParams):
        self._state = state.copy()
        self._noise_params = noise_params
        self.calls.append(EstimatorCall('initialize', (state, noise_params)))

    def propagate(self, imu: ImuSample, dt: float):
        self.calls.append(EstimatorCall('propagate', (imu, dt)))

    def set_contacts(self, contacts: List[Tuple[int, bool]]):
        self.contacts = list(contacts)
        self.calls.append(EstimatorCall('set_contacts', (self.contacts,)))

    def correct_kinematics(self, observations: List[KinematicEntry]):
        self.calls.append(EstimatorCall('correct_kinematics', (list(observations),)))

    def get_state(self) -> RobotState:
        return self._state.copy()

    def get_noise_params(self) -> NoiseParams:
        return self._noise_params

    def calls_named(self, name: str) -> List[EstimatorCall]:
        """All recorded calls with the given method name"""
        return [call for call in self.calls if call.name == name]

    def last_call(self, name: Optional[str] = None) -> Optional[EstimatorCall]:
        calls = self.calls if name is None else self.calls_named(name)
        return calls[-1] if calls else None
