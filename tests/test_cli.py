"""
Tests for the replay command line.
Run with: pytest tests/ -v
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from inekf_replay.cli import load_estimator, main
from inekf_replay.estimation import RecordingEstimator


DATA_FILE = Path(__file__).parent.parent / "data" / "imu_kinematic_measurements.txt"


class TestLoadEstimator:
    """Test estimator selection."""

    def test_default_is_recording(self):
        assert isinstance(load_estimator(None), RecordingEstimator)

    def test_import_path(self):
        estimator = load_estimator("inekf_replay.estimation.recording:RecordingEstimator")
        assert isinstance(estimator, RecordingEstimator)

    def test_malformed_path(self):
        with pytest.raises(ValueError):
            load_estimator("inekf_replay.estimation.recording")

    def test_not_an_estimator(self):
        with pytest.raises(TypeError):
            load_estimator("collections:OrderedDict")


class TestMain:
    """Test end-to-end replay from the command line."""

    def test_sample_log(self, capsys):
        assert main([str(DATA_FILE)]) == 0

        out = capsys.readouterr().out
        assert "Noise parameters are initialized to:" in out
        assert "IMU samples: 5 (propagated 4, gated 1)" in out
        assert "Kinematic observations: 2" in out
        assert "Skipped records: 0" in out

    def test_missing_log(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "cannot read log" in capsys.readouterr().err

    def test_lenient_skips(self, tmp_path, capsys):
        log = tmp_path / "log.txt"
        log.write_text("IMU 0.0 0 0 0 0 0 0\nIMU 0.1 0 0\nIMU 0.2 0 0 0 0 0 0\n")

        assert main([str(log)]) == 0
        assert "Skipped records: 1" in capsys.readouterr().out

    def test_strict_stops(self, tmp_path, capsys):
        log = tmp_path / "log.txt"
        log.write_text("IMU 0.0 0 0 0 0 0 0\nCONTACT 0.1 0\n")

        assert main([str(log), "--strict"]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_gate_flags(self, tmp_path, capsys):
        log = tmp_path / "log.txt"
        log.write_text("IMU 0.0 0 0 0 0 0 0\nIMU 3.0 0 0 0 0 0 0\n")

        assert main([str(log), "--dt-max", "5"]) == 0
        assert "propagated 1" in capsys.readouterr().out

    def test_bad_gate_flags(self, tmp_path, capsys):
        log = tmp_path / "log.txt"
        log.write_text("")

        assert main([str(log), "--dt-min", "2", "--dt-max", "1"]) == 1
        assert "dt_min" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / "replay.yaml"
        config.write_text("noise_params:\n  contact_noise: 0.05\n")
        log = tmp_path / "log.txt"
        log.write_text("")

        assert main([str(log), "--config", str(config)]) == 0
        assert "Contact Noise std: 0.05" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
