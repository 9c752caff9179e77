#!/usr/bin/env python3
"""
Measurement Dispatcher
Replays a sensor log into an estimator, one line at a time

Author: Al Numan
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..estimation.interface import Estimator
from ..estimation.robot_state import NoiseParams, RobotState
from ..measurements.contact_tracker import ContactStateTracker
from ..measurements.errors import RecordError
from ..measurements.parser import parse_line
from ..measurements.records import (
    ContactSet,
    ImuSample,
    KinematicObservation,
    Record,
    UnknownRecord
)
from .temporal_gate import TemporalGate, TemporalGateConfig


_LOG = logging.getLogger(__name__)


@dataclass
class DispatchReport:
    """What happened while replaying a log"""
    lines: int = 0
    imu: int = 0
    propagated: int = 0
    gated: int = 0
    contact: int = 0
    kinematic: int = 0
    unknown: int = 0
    errors: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.errors)

    def summary(self) -> str:
        return (
            f"lines={self.lines} imu={self.imu} propagated={self.propagated} "
            f"gated={self.gated} contact={self.contact} kinematic={self.kinematic} "
            f"unknown={self.unknown} skipped={self.skipped}"
        )


class MeasurementDispatcher:
    """
    Sequential log replay

    Each line is parsed, classified and handed to the estimator before
    the next one is read:

    - IMU: propagate with the *previous* IMU sample over dt = t - t_prev,
      if the temporal gate admits dt. The new sample is cached either way.
    - CONTACT: forwarded as a full replacement set.
    - KINEMATIC: forwarded to the correction step.
    - Unknown tags: ignored.

    Only the previous timestamp and previous IMU sample survive between
    lines.
    """

    def __init__(
        self,
        estimator: Estimator,
        gate_config: TemporalGateConfig = None,
        strict: bool = False
    ):
        """
        Initialize dispatcher

        Args:
            estimator: Estimator receiving the measurements
            gate_config: Accepted propagation step range
            strict: Raise on the first bad line instead of skipping it
        """
        self.estimator = estimator
        self.gate = TemporalGate(gate_config)
        self.strict = strict
        self.contact_tracker = ContactStateTracker(estimator)

        # One-step cache
        self.previous_timestamp = 0.0
        self.previous_imu = ImuSample.zero()

        self.report = DispatchReport()

    def initialize(self, state: RobotState, noise_params: NoiseParams):
        """Hand the initial state and noise to the estimator"""
        self.estimator.initialize(state, noise_params)

    def dispatch(self, record: Record):
        """
        Act on one parsed record and update the cache

        Args:
            record: Output of the record parser
        """
        if isinstance(record, UnknownRecord):
            self.report.unknown += 1
            _LOG.debug("Ignoring record with unknown tag %r", record.tag)
            return

        if isinstance(record, ImuSample):
            self._handle_imu(record)
        elif isinstance(record, ContactSet):
            self.report.contact += 1
            self.contact_tracker.forward(record)
        elif isinstance(record, KinematicObservation):
            self.report.kinematic += 1
            _LOG.debug(
                "Received KINEMATIC observation at t=%.6f, correcting state with %d entries",
                record.timestamp,
                len(record)
            )
            self.estimator.correct_kinematics(list(record.entries))
        else:
            raise TypeError(f"Cannot dispatch {type(record).__name__}")

        self.previous_timestamp = record.timestamp

    def _handle_imu(self, imu: ImuSample):
        self.report.imu += 1
        dt = self.gate.elapsed(imu.timestamp, self.previous_timestamp)

        if self.gate.admit(dt):
            _LOG.debug("Received IMU data at t=%.6f, propagating state (dt=%g)", imu.timestamp, dt)
            # Propagation uses the sample cached on the previous IMU line
            self.estimator.propagate(self.previous_imu, dt)
            self.report.propagated += 1
        else:
            _LOG.debug("Skipping IMU propagation at t=%.6f, dt=%g out of range", imu.timestamp, dt)
            self.report.gated += 1

        self.previous_imu = imu

    def process_line(self, line: str, line_number: Optional[int] = None):
        """
        Parse and dispatch one log line

        Bad lines are logged and skipped unless the dispatcher is strict,
        in which case the RecordError propagates.
        """
        self.report.lines += 1
        try:
            record = parse_line(line)
        except RecordError as exc:
            exc.with_context(line.rstrip("\n"), line_number)
            if self.strict:
                raise
            _LOG.warning("Skipping record, %s", exc)
            self.report.errors.append((line_number, exc.message))
            return

        self.dispatch(record)

    def run(self, lines: Iterable[str]) -> DispatchReport:
        """
        Replay lines until the input is exhausted

        Args:
            lines: Log lines, e.g. an open text file

        Returns:
            DispatchReport for the whole run
        """
        for line_number, line in enumerate(lines, start=1):
            self.process_line(line, line_number)

        _LOG.info("Replay finished: %s", self.report.summary())
        return self.report

    def run_file(self, path: Union[str, Path]) -> DispatchReport:
        """Replay a log file from disk"""
        with open(path, 'r') as f:
            return self.run(f)

    def final_state(self) -> RobotState:
        return self.estimator.get_state()

    def noise_params(self) -> NoiseParams:
        return self.estimator.get_noise_params()
