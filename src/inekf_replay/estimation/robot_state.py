#!/usr/bin/env python3
"""
Initial state mean and noise parameters handed to the estimator

Author: Al Numan
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Dict


def _vector3(value: Any, name: str) -> np.ndarray:
    v = np.array(value, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {v.shape}")
    return v


@dataclass(eq=False)
class RobotState:
    """
    Mean of the filter state

    - R: base orientation (world from IMU)
    - v: velocity (world frame)
    - p: position (world frame)
    - b_g, b_a: gyroscope and accelerometer biases
    """
    rotation: np.ndarray = field(default_factory=lambda: np.eye(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    gyroscope_bias: np.ndarray = field(default_factory=lambda: np.zeros(3))
    accelerometer_bias: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.rotation = np.array(self.rotation, dtype=float)
        if self.rotation.shape != (3, 3):
            raise ValueError(f"rotation must be 3x3, got shape {self.rotation.shape}")
        self.velocity = _vector3(self.velocity, "velocity")
        self.position = _vector3(self.position, "position")
        self.gyroscope_bias = _vector3(self.gyroscope_bias, "gyroscope_bias")
        self.accelerometer_bias = _vector3(self.accelerometer_bias, "accelerometer_bias")

    @classmethod
    def default(cls) -> 'RobotState':
        """Resting state with the IMU frame flipped about the x axis"""
        return cls(
            rotation=np.array([
                [1.0, 0.0, 0.0],
                [0.0, -1.0, 0.0],
                [0.0, 0.0, -1.0]
            ])
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RobotState':
        """Build from a config mapping, missing keys keep their defaults"""
        defaults = cls.default().to_dict()
        unknown = set(data) - set(defaults)
        if unknown:
            raise KeyError(f"Unknown state keys: {sorted(unknown)}")
        defaults.update(data)
        return cls(**defaults)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rotation': self.rotation.tolist(),
            'velocity': self.velocity.tolist(),
            'position': self.position.tolist(),
            'gyroscope_bias': self.gyroscope_bias.tolist(),
            'accelerometer_bias': self.accelerometer_bias.tolist(),
        }

    def copy(self) -> 'RobotState':
        return RobotState(
            rotation=self.rotation.copy(),
            velocity=self.velocity.copy(),
            position=self.position.copy(),
            gyroscope_bias=self.gyroscope_bias.copy(),
            accelerometer_bias=self.accelerometer_bias.copy()
        )

    def __str__(self) -> str:
        with np.printoptions(precision=6, suppress=True):
            return "\n".join([
                "--------- Robot State -------------",
                f"Rotation:\n{self.rotation}",
                f"Velocity: {self.velocity}",
                f"Position: {self.position}",
                f"Gyroscope Bias: {self.gyroscope_bias}",
                f"Accelerometer Bias: {self.accelerometer_bias}",
                "-----------------------------------",
            ])


@dataclass
class NoiseParams:
    """Sensor noise standard deviations"""
    # Continuous-time white noise
    gyroscope_noise: float = 0.01
    accelerometer_noise: float = 0.1

    # Bias random walk
    gyroscope_bias_noise: float = 0.00001
    accelerometer_bias_noise: float = 0.0001

    # Contact point velocity noise
    contact_noise: float = 0.01

    def __post_init__(self):
        for name, value in self.to_dict().items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NoiseParams':
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise KeyError(f"Unknown noise parameter keys: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in data.items()})

    def to_dict(self) -> Dict[str, float]:
        return {
            'gyroscope_noise': self.gyroscope_noise,
            'accelerometer_noise': self.accelerometer_noise,
            'gyroscope_bias_noise': self.gyroscope_bias_noise,
            'accelerometer_bias_noise': self.accelerometer_bias_noise,
            'contact_noise': self.contact_noise,
        }

    # Covariances are std^2 * I
    def gyroscope_cov(self) -> np.ndarray:
        return np.eye(3) * self.gyroscope_noise ** 2

    def accelerometer_cov(self) -> np.ndarray:
        return np.eye(3) * self.accelerometer_noise ** 2

    def gyroscope_bias_cov(self) -> np.ndarray:
        return np.eye(3) * self.gyroscope_bias_noise ** 2

    def accelerometer_bias_cov(self) -> np.ndarray:
        return np.eye(3) * self.accelerometer_bias_noise ** 2

    def contact_cov(self) -> np.ndarray:
        return np.eye(3) * self.contact_noise ** 2

    def __str__(self) -> str:
        return "\n".join([
            "--------- Noise Params -------------",
            f"Gyroscope Noise std: {self.gyroscope_noise:g}",
            f"Accelerometer Noise std: {self.accelerometer_noise:g}",
            f"Gyroscope Bias Noise std: {self.gyroscope_bias_noise:g}",
            f"Accelerometer Bias Noise std: {self.accelerometer_bias_noise:g}",
            f"Contact Noise std: {self.contact_noise:g}",
            "------------------------------------",
        ])
