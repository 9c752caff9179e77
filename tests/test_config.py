"""
Tests for replay configuration and estimator initialization values.
Run with: pytest tests/ -v
"""

import numpy as np
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from inekf_replay.config import ConfigError, DriverConfig, load_config
from inekf_replay.estimation import NoiseParams, RobotState


CONFIG_FILE = Path(__file__).parent.parent / "config" / "replay.yaml"


class TestConfiguration:
    """Test YAML configuration loading."""

    def test_default_file_matches_defaults(self):
        config = load_config(CONFIG_FILE)
        defaults = DriverConfig()

        assert config.gate == defaults.gate
        assert config.strict is False
        np.testing.assert_allclose(config.initial_state.rotation, defaults.initial_state.rotation)
        assert config.noise_params == defaults.noise_params

    def test_partial_file(self, tmp_path):
        path = tmp_path / "replay.yaml"
        path.write_text("gate:\n  dt_max: 2.5\nstrict: true\n")

        config = load_config(path)
        assert config.gate.dt_min == 1e-6
        assert config.gate.dt_max == 2.5
        assert config.strict is True

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.gate == DriverConfig().gate
        assert config.strict is False
        assert config.noise_params == NoiseParams()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("gate: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize("data", [
        {"filter": {}},
        {"gate": {"dt_mid": 0.1}},
        {"gate": {"dt_min": 2.0, "dt_max": 1.0}},
        {"strict": "yes"},
        {"noise_params": {"gyro": 0.1}},
        {"noise_params": {"contact_noise": -1.0}},
        {"initial_state": {"position": [0, 0]}},
        [1, 2, 3],
    ])
    def test_bad_values(self, data):
        with pytest.raises(ConfigError):
            DriverConfig.from_dict(data)

    def test_dict_round_trip(self):
        config = DriverConfig.from_dict({"noise_params": {"accelerometer_noise": 0.2}})
        again = DriverConfig.from_dict(config.to_dict())
        assert again.noise_params.accelerometer_noise == 0.2
        assert again.gate == config.gate


class TestRobotState:
    """Test initial state values."""

    def test_default_orientation(self):
        state = RobotState.default()
        np.testing.assert_allclose(state.rotation, np.diag([1.0, -1.0, -1.0]))
        np.testing.assert_allclose(state.velocity, np.zeros(3))
        np.testing.assert_allclose(state.accelerometer_bias, np.zeros(3))

    def test_copy_is_independent(self):
        state = RobotState.default()
        other = state.copy()
        other.position[0] = 5.0
        assert state.position[0] == 0.0

    def test_bad_rotation_shape(self):
        with pytest.raises(ValueError):
            RobotState(rotation=np.eye(4))

    def test_str(self):
        assert "Robot State" in str(RobotState.default())


class TestNoiseParams:
    """Test noise parameter defaults and covariances."""

    def test_defaults(self):
        noise = NoiseParams()
        assert noise.gyroscope_noise == 0.01
        assert noise.accelerometer_noise == 0.1
        assert noise.gyroscope_bias_noise == 0.00001
        assert noise.accelerometer_bias_noise == 0.0001
        assert noise.contact_noise == 0.01

    def test_covariance_is_variance(self):
        noise = NoiseParams(gyroscope_noise=0.1)
        np.testing.assert_allclose(noise.gyroscope_cov(), np.eye(3) * 0.01)
        np.testing.assert_allclose(noise.contact_cov(), np.eye(3) * 1e-4)

    def test_str(self):
        assert "Contact Noise" in str(NoiseParams())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
