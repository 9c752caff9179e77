#!/usr/bin/env python3
"""
Replay configuration
Temporal gate limits, error policy and estimator initialization

Example YAML:

    gate:
      dt_min: 1.0e-6
      dt_max: 1.0
    strict: false
    initial_state:
      velocity: [0.0, 0.0, 0.0]
    noise_params:
      gyroscope_noise: 0.01
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from .dispatch.temporal_gate import TemporalGateConfig
from .estimation.robot_state import NoiseParams, RobotState


class ConfigError(ValueError):
    """Configuration file could not be read or has bad values"""


@dataclass
class DriverConfig:
    """Everything the replay driver needs besides the log itself"""
    gate: TemporalGateConfig = field(default_factory=TemporalGateConfig)
    strict: bool = False
    initial_state: RobotState = field(default_factory=RobotState.default)
    noise_params: NoiseParams = field(default_factory=NoiseParams)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DriverConfig':
        """
        Build config from a parsed mapping

        Args:
            data: Mapping with optional gate, strict, initial_state and
                noise_params sections

        Returns:
            DriverConfig

        Raises:
            ConfigError: Unknown section or key, or invalid value
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {'gate', 'strict', 'initial_state', 'noise_params'}
        if unknown:
            raise ConfigError(f"Unknown config sections: {sorted(unknown)}")

        try:
            gate_cfg = data.get('gate') or {}
            unknown_gate = set(gate_cfg) - {'dt_min', 'dt_max'}
            if unknown_gate:
                raise KeyError(f"Unknown gate keys: {sorted(unknown_gate)}")
            gate = TemporalGateConfig(
                dt_min=float(gate_cfg.get('dt_min', TemporalGateConfig.dt_min)),
                dt_max=float(gate_cfg.get('dt_max', TemporalGateConfig.dt_max))
            )

            strict = data.get('strict', False)
            if not isinstance(strict, bool):
                raise TypeError(f"strict must be true or false, got {strict!r}")

            return cls(
                gate=gate,
                strict=strict,
                initial_state=RobotState.from_dict(data.get('initial_state') or {}),
                noise_params=NoiseParams.from_dict(data.get('noise_params') or {})
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gate': {'dt_min': self.gate.dt_min, 'dt_max': self.gate.dt_max},
            'strict': self.strict,
            'initial_state': self.initial_state.to_dict(),
            'noise_params': self.noise_params.to_dict(),
        }


def load_config(config_path: Union[str, Path]) -> DriverConfig:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Cannot parse config {config_path}: {exc}") from exc

    return DriverConfig.from_dict(data)
