#!/usr/bin/env python3
"""
Mathematical utilities for measurement reconstruction
Quaternion handling and homogeneous transforms
"""

import numpy as np


def normalize_quaternion(q: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Scale a quaternion to unit length

    Args:
        q: Quaternion [w, x, y, z] (scalar first), any scale
        eps: Smallest norm accepted

    Returns:
        Unit quaternion [w, x, y, z]

    Raises:
        ValueError: If the quaternion norm is zero or not finite
    """
    q = np.asarray(q, dtype=float)
    norm = np.linalg.norm(q)
    if not np.isfinite(norm) or norm < eps:
        raise ValueError(f"Cannot normalize quaternion with norm {norm}")
    return q / norm


def quaternion_to_rotation_matrix(q: np.ndarray) -> np.ndarray:
    """
    Convert unit quaternion to rotation matrix

    Args:
        q: Unit quaternion [w, x, y, z] (scalar first), see normalize_quaternion

    Returns:
        3x3 rotation matrix
    """
    w, x, y, z = q

    R = np.array([
        [1 - 2*(y*y + z*z), 2*(x*y - w*z), 2*(x*z + w*y)],
        [2*(x*y + w*z), 1 - 2*(x*x + z*z), 2*(y*z - w*x)],
        [2*(x*z - w*y), 2*(y*z + w*x), 1 - 2*(x*x + y*y)]
    ])

    return R


def homogeneous_transform(R: np.ndarray, p: np.ndarray) -> np.ndarray:
    """
    Assemble a 4x4 homogeneous transform

    Args:
        R: 3x3 rotation matrix
        p: 3D translation

    Returns:
        4x4 transformation matrix with [0, 0, 0, 1] bottom row
    """
    T = np.eye(4)
    T[:3, :3] = R
    T[:3, 3] = p
    return T
