"""
Measurement records and parsing
Log lines to IMU, contact and kinematic records
"""

from .errors import RecordError, MalformedRecordError, NumericParseError
from .records import (
    ImuSample,
    ContactSet,
    KinematicEntry,
    KinematicObservation,
    UnknownRecord,
    Record
)
from .parser import parse_line, parse_tokens, tokenize
from .kinematics import build_pose, build_covariance, build_entry, build_entries
from .contact_tracker import ContactStateTracker

__all__ = [
    'RecordError',
    'MalformedRecordError',
    'NumericParseError',
    'ImuSample',
    'ContactSet',
    'KinematicEntry',
    'KinematicObservation',
    'UnknownRecord',
    'Record',
    'parse_line',
    'parse_tokens',
    'tokenize',
    'build_pose',
    'build_covariance',
    'build_entry',
    'build_entries',
    'ContactStateTracker'
]
