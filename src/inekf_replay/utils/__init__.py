"""Utility modules for measurement reconstruction"""

from .math_utils import (
    normalize_quaternion,
    quaternion_to_rotation_matrix,
    homogeneous_transform
)

__all__ = [
    'normalize_quaternion',
    'quaternion_to_rotation_matrix',
    'homogeneous_transform'
]
