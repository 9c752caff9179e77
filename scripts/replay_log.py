#!/usr/bin/env python3
"""
Replay a measurement log through the contact-aided InEKF driver

Usage:
    python scripts/replay_log.py data/imu_kinematic_measurements.txt -v

Author: Al Numan
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from inekf_replay.cli import main


if __name__ == "__main__":
    sys.exit(main())
