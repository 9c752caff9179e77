#!/usr/bin/env python3
"""
Kinematic Observation Builder
Rebuilds pose transforms and covariances from flat token blocks

Each observed body occupies 44 consecutive tokens:

    id | qw qx qy qz | px py pz | c00 c01 ... c55

The covariance is stored row-major, so the value for (row j, col k)
sits at offset 8 + j*6 + k from the start of the block.
"""

import numpy as np
from typing import Sequence, Tuple

from ..utils.math_utils import (
    normalize_quaternion,
    quaternion_to_rotation_matrix,
    homogeneous_transform
)
from .errors import MalformedRecordError, NumericParseError
from .records import KinematicEntry


KINEMATIC_ENTRY_SIZE = 44
QUATERNION_OFFSET = 1
POSITION_OFFSET = 5
COVARIANCE_OFFSET = 8
COVARIANCE_DIM = 6


def parse_float(token: str) -> float:
    """Parse a floating point token, raising NumericParseError on failure"""
    try:
        return float(token)
    except (TypeError, ValueError):
        raise NumericParseError(f"Expected a number, got {token!r}") from None


def parse_int(token: str) -> int:
    """Parse an integer token, raising NumericParseError on failure"""
    try:
        return int(token)
    except (TypeError, ValueError):
        raise NumericParseError(f"Expected an integer, got {token!r}") from None


def build_pose(quaternion: Sequence[float], position: Sequence[float]) -> np.ndarray:
    """
    Assemble a homogeneous transform from a quaternion and a position

    Args:
        quaternion: [w, x, y, z], normalized here before conversion
        position: [x, y, z]

    Returns:
        4x4 transform with the rotation in the top-left block
    """
    try:
        q = normalize_quaternion(np.asarray(quaternion, dtype=float))
    except ValueError as exc:
        raise MalformedRecordError(str(exc)) from None

    R = quaternion_to_rotation_matrix(q)
    return homogeneous_transform(R, np.asarray(position, dtype=float))


def build_covariance(values: Sequence[float]) -> np.ndarray:
    """
    Fill a 6x6 covariance row-major from 36 values

    Args:
        values: Flat values, value[j*6 + k] goes to (j, k)

    Returns:
        6x6 covariance matrix
    """
    if len(values) != COVARIANCE_DIM * COVARIANCE_DIM:
        raise MalformedRecordError(
            f"Covariance needs {COVARIANCE_DIM * COVARIANCE_DIM} values, got {len(values)}"
        )

    cov = np.zeros((COVARIANCE_DIM, COVARIANCE_DIM))
    for j in range(COVARIANCE_DIM):
        for k in range(COVARIANCE_DIM):
            cov[j, k] = values[j * COVARIANCE_DIM + k]
    return cov


def build_entry(tokens: Sequence[str]) -> KinematicEntry:
    """
    Build one kinematic entry from its 44-token block

    Args:
        tokens: id, quaternion (w, x, y, z), position, 36 covariance values

    Returns:
        KinematicEntry
    """
    if len(tokens) != KINEMATIC_ENTRY_SIZE:
        raise MalformedRecordError(
            f"Kinematic entry needs {KINEMATIC_ENTRY_SIZE} tokens, got {len(tokens)}"
        )

    body_id = parse_int(tokens[0])
    quaternion = [parse_float(t) for t in tokens[QUATERNION_OFFSET:POSITION_OFFSET]]
    position = [parse_float(t) for t in tokens[POSITION_OFFSET:COVARIANCE_OFFSET]]
    cov_values = [parse_float(t) for t in tokens[COVARIANCE_OFFSET:KINEMATIC_ENTRY_SIZE]]

    return KinematicEntry(
        body_id=body_id,
        pose=build_pose(quaternion, position),
        covariance=build_covariance(cov_values)
    )


def build_entries(payload: Sequence[str]) -> Tuple[KinematicEntry, ...]:
    """
    Build all kinematic entries of a KINEMATIC payload, in input order

    Args:
        payload: Tokens after tag and timestamp

    Returns:
        Tuple of KinematicEntry, one per 44-token block
    """
    if len(payload) % KINEMATIC_ENTRY_SIZE != 0:
        raise MalformedRecordError(
            f"KINEMATIC payload length {len(payload)} is not a multiple of "
            f"{KINEMATIC_ENTRY_SIZE}"
        )

    return tuple(
        build_entry(payload[i:i + KINEMATIC_ENTRY_SIZE])
        for i in range(0, len(payload), KINEMATIC_ENTRY_SIZE)
    )
