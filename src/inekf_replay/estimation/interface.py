#!/usr/bin/env python3
"""
Estimator interface
The boundary between measurement dispatch and the invariant EKF
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..measurements.records import ImuSample, KinematicEntry
from .robot_state import NoiseParams, RobotState


class Estimator(ABC):
    """
    Abstract contact-aided state estimator

    The dispatcher only ever calls these methods, synchronously and in
    log order. How state and covariance are propagated and corrected is
    up to the implementation.
    """

    @abstractmethod
    def initialize(self, state: RobotState, noise_params: NoiseParams):
        """
        One-time setup before any measurement arrives

        Args:
            state: Initial state mean
            noise_params: Sensor noise parameters
        """
        pass

    @abstractmethod
    def propagate(self, imu: ImuSample, dt: float):
        """
        Advance the state with an inertial sample

        Args:
            imu: IMU sample driving the prediction
            dt: Elapsed time (s)
        """
        pass

    @abstractmethod
    def set_contacts(self, contacts: List[Tuple[int, bool]]):
        """Replace the contact hypothesis with (leg id, in contact) pairs"""
        pass

    @abstractmethod
    def correct_kinematics(self, observations: List[KinematicEntry]):
        """Correct the state with leg kinematic observations"""
        pass

    @abstractmethod
    def get_state(self) -> RobotState:
        pass

    @abstractmethod
    def get_noise_params(self) -> NoiseParams:
        pass
