#!/usr/bin/env python3
"""
Record Parser
Turns one whitespace-separated log line into a typed measurement record

Supported lines:

    IMU <t> <wx> <wy> <wz> <ax> <ay> <az>
    CONTACT <t> <id_0> <indicator_0> [<id_1> <indicator_1> ...]
    KINEMATIC <t> <id_0> <qw_0> <qx_0> <qy_0> <qz_0> <px_0> <py_0> <pz_0> <cov_0[0..35]> [...]

Any other tag (including an empty line) yields an UnknownRecord.
"""

import numpy as np
from typing import Callable, Dict, List, Sequence

from .errors import MalformedRecordError, NumericParseError
from .kinematics import build_entries, parse_float, parse_int
from .records import ContactSet, ImuSample, KinematicObservation, Record, UnknownRecord


IMU_TAG = "IMU"
CONTACT_TAG = "CONTACT"
KINEMATIC_TAG = "KINEMATIC"

IMU_PAYLOAD_SIZE = 6
CONTACT_PAIR_SIZE = 2

# Tag and timestamp precede the payload
HEADER_SIZE = 2


def tokenize(line: str) -> List[str]:
    """Split a log line on whitespace"""
    return line.split()


def parse_timestamp(token: str) -> float:
    """Parse a record timestamp, which must be a finite number of seconds"""
    timestamp = parse_float(token)
    if not np.isfinite(timestamp):
        raise NumericParseError(f"Timestamp must be finite, got {token!r}")
    return timestamp


def parse_imu(timestamp: float, payload: Sequence[str]) -> ImuSample:
    """
    Parse an IMU payload

    Args:
        timestamp: Record time (s)
        payload: wx wy wz ax ay az

    Returns:
        ImuSample
    """
    if len(payload) != IMU_PAYLOAD_SIZE:
        raise MalformedRecordError(
            f"IMU payload needs {IMU_PAYLOAD_SIZE} values, got {len(payload)}"
        )

    values = np.array([parse_float(t) for t in payload])
    return ImuSample(
        timestamp=timestamp,
        angular_velocity=values[0:3],
        linear_acceleration=values[3:6]
    )


def parse_contact(timestamp: float, payload: Sequence[str]) -> ContactSet:
    """
    Parse a CONTACT payload into (id, in_contact) pairs

    The indicator is read as a number; any non-zero value means contact.
    """
    if len(payload) % CONTACT_PAIR_SIZE != 0:
        raise MalformedRecordError(
            f"CONTACT payload length {len(payload)} is not even"
        )

    contacts = []
    for i in range(0, len(payload), CONTACT_PAIR_SIZE):
        leg_id = parse_int(payload[i])
        indicator = bool(parse_float(payload[i + 1]))
        contacts.append((leg_id, indicator))

    return ContactSet(timestamp=timestamp, contacts=tuple(contacts))


def parse_kinematic(timestamp: float, payload: Sequence[str]) -> KinematicObservation:
    """Parse a KINEMATIC payload, one entry per 44-token block"""
    return KinematicObservation(timestamp=timestamp, entries=build_entries(payload))


HANDLERS: Dict[str, Callable[[float, Sequence[str]], Record]] = {
    IMU_TAG: parse_imu,
    CONTACT_TAG: parse_contact,
    KINEMATIC_TAG: parse_kinematic,
}


def parse_tokens(tokens: Sequence[str]) -> Record:
    """
    Build a record from pre-split tokens

    Args:
        tokens: token[0] is the tag, token[1] the timestamp

    Returns:
        ImuSample, ContactSet, KinematicObservation or UnknownRecord

    Raises:
        MalformedRecordError: Field count does not fit the record type
        NumericParseError: A numeric field could not be parsed
    """
    if not tokens:
        return UnknownRecord(tag="")

    tag = tokens[0]
    handler = HANDLERS.get(tag)
    if handler is None:
        return UnknownRecord(tag=tag, tokens=tuple(tokens))

    if len(tokens) < HEADER_SIZE:
        raise MalformedRecordError(f"{tag} record has no timestamp")

    timestamp = parse_timestamp(tokens[1])
    return handler(timestamp, tokens[HEADER_SIZE:])


def parse_line(line: str) -> Record:
    """Parse one log line into a measurement record"""
    return parse_tokens(tokenize(line))
