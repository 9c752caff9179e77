"""
Tests for kinematic observation reconstruction.
Run with: pytest tests/ -v
"""

import numpy as np
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from inekf_replay.measurements import (
    MalformedRecordError,
    build_covariance,
    build_entries,
    build_entry,
    build_pose
)
from inekf_replay.utils.math_utils import (
    normalize_quaternion,
    quaternion_to_rotation_matrix,
    homogeneous_transform
)


class TestPose:
    """Test homogeneous transform assembly."""

    def test_identity_rotation_and_translation(self):
        H = build_pose([1, 0, 0, 0], [1, 2, 3])

        expected = np.eye(4)
        expected[:3, 3] = [1, 2, 3]
        np.testing.assert_allclose(H, expected)

    def test_bottom_row(self):
        H = build_pose([0.3, -0.2, 0.5, 0.7], [4, 5, 6])
        np.testing.assert_allclose(H[3], [0, 0, 0, 1])

    def test_scaled_quaternion_gives_same_rotation(self):
        q = np.array([0.9, 0.1, -0.3, 0.2])
        np.testing.assert_allclose(
            build_pose(q, [0, 0, 0]),
            build_pose(5.0 * q, [0, 0, 0]),
            atol=1e-12
        )

    def test_rotation_about_z(self):
        half = np.pi / 4
        H = build_pose([np.cos(half), 0, 0, np.sin(half)], [0, 0, 0])
        np.testing.assert_allclose(H[:3, :3] @ [1, 0, 0], [0, 1, 0], atol=1e-12)

    def test_zero_quaternion(self):
        with pytest.raises(MalformedRecordError):
            build_pose([0, 0, 0, 0], [0, 0, 0])


class TestCovariance:
    """Test row-major covariance fill."""

    def test_row_major(self):
        cov = build_covariance(list(range(36)))
        assert cov[2, 3] == 15
        assert cov[0, 5] == 5
        assert cov[5, 0] == 30

    def test_wrong_size(self):
        with pytest.raises(MalformedRecordError):
            build_covariance([0.0] * 35)


class TestEntries:
    """Test 44-token entry handling."""

    def test_covariance_offset(self):
        tokens = ["2", "1", "0", "0", "0", "0", "0", "0"] + [str(v) for v in range(36)]
        entry = build_entry(tokens)

        assert entry.body_id == 2
        assert entry.covariance.shape == (6, 6)
        # token at offset 8 + 2*6 + 3 carries value 15
        assert entry.covariance[2, 3] == float(tokens[8 + 2 * 6 + 3])

    def test_entry_wrong_size(self):
        with pytest.raises(MalformedRecordError):
            build_entry(["0"] * 43)

    def test_multiple_entries(self):
        block = ["0", "1", "0", "0", "0", "0", "0", "0"] + ["0"] * 36
        second = list(block)
        second[0] = "1"
        entries = build_entries(block + second)
        assert [e.body_id for e in entries] == [0, 1]

    def test_empty_payload(self):
        assert build_entries([]) == ()


class TestMathUtils:
    """Test quaternion helpers."""

    def test_normalize(self):
        q = normalize_quaternion([0, 3, 0, 4])
        np.testing.assert_allclose(q, [0, 0.6, 0, 0.8])

    def test_normalize_rejects_zero(self):
        with pytest.raises(ValueError):
            normalize_quaternion([0, 0, 0, 0])

    def test_rotation_from_unit_quaternion(self):
        half = np.pi / 6
        R = quaternion_to_rotation_matrix(np.array([np.cos(half), np.sin(half), 0.0, 0.0]))
        # 60 degrees about x
        np.testing.assert_allclose(R @ [0, 1, 0], [0, np.cos(2 * half), np.sin(2 * half)], atol=1e-12)
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)

    def test_homogeneous_transform(self):
        T = homogeneous_transform(np.eye(3), np.array([1.0, -1.0, 0.5]))
        np.testing.assert_allclose(T @ [0, 0, 0, 1], [1.0, -1.0, 0.5, 1.0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
