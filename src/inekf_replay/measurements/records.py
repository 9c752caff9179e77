#!/usr/bin/env python3
"""
Measurement records reconstructed from a sensor log

Every record is transient: built from one line, handed to the
dispatcher, then dropped.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True, eq=False)
class ImuSample:
    """Gyroscope and accelerometer reading (body frame)"""
    timestamp: float
    angular_velocity: np.ndarray     # [wx, wy, wz] rad/s
    linear_acceleration: np.ndarray  # [ax, ay, az] m/s^2

    def __post_init__(self):
        for name in ('angular_velocity', 'linear_acceleration'):
            value = np.array(getattr(self, name), dtype=float).reshape(3)
            value.setflags(write=False)
            object.__setattr__(self, name, value)

    @classmethod
    def zero(cls, timestamp: float = 0.0) -> 'ImuSample':
        """All-zero sample, used before the first IMU line arrives"""
        return cls(
            timestamp=timestamp,
            angular_velocity=np.zeros(3),
            linear_acceleration=np.zeros(3)
        )

    def as_vector(self) -> np.ndarray:
        """Stacked [wx, wy, wz, ax, ay, az]"""
        return np.concatenate([self.angular_velocity, self.linear_acceleration])


@dataclass(frozen=True)
class ContactSet:
    """Complete set of (leg id, in contact) indicators at one instant"""
    timestamp: float
    contacts: Tuple[Tuple[int, bool], ...] = ()


@dataclass(frozen=True, eq=False)
class KinematicEntry:
    """Pose of one body relative to the IMU frame, with its uncertainty"""
    body_id: int
    pose: np.ndarray        # 4x4 homogeneous transform
    covariance: np.ndarray  # 6x6

    @property
    def rotation(self) -> np.ndarray:
        return self.pose[:3, :3]

    @property
    def position(self) -> np.ndarray:
        return self.pose[:3, 3]


@dataclass(frozen=True, eq=False)
class KinematicObservation:
    """All kinematic entries reported on one line"""
    timestamp: float
    entries: Tuple[KinematicEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class UnknownRecord:
    """Line whose tag is not a known record type (ignored)"""
    tag: str
    tokens: Tuple[str, ...] = field(default_factory=tuple)


Record = Union[ImuSample, ContactSet, KinematicObservation, UnknownRecord]
