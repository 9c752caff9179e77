#!/usr/bin/env python3
"""
Temporal Gate
Admission rule for IMU propagation based on the elapsed time
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemporalGateConfig:
    """Open interval of accepted propagation steps"""
    dt_min: float = 1e-6  # s, rejects repeated or out-of-order stamps
    dt_max: float = 1.0   # s, rejects logging gaps

    def __post_init__(self):
        if not self.dt_min < self.dt_max:
            raise ValueError(
                f"dt_min ({self.dt_min}) must be smaller than dt_max ({self.dt_max})"
            )


class TemporalGate:
    """Decides whether a time step is fit to drive propagation"""

    def __init__(self, config: TemporalGateConfig = None):
        self.config = config or TemporalGateConfig()

    @staticmethod
    def elapsed(timestamp: float, previous_timestamp: float) -> float:
        return timestamp - previous_timestamp

    def admit(self, dt: float) -> bool:
        """True iff dt_min < dt < dt_max (NaN is never admitted)"""
        return self.config.dt_min < dt < self.config.dt_max
