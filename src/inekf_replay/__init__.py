"""
InEKF Replay
============

Measurement ingestion and dispatch for contact-aided invariant EKF
state estimation on legged robots. Replays IMU, contact and leg
kinematic logs into an estimator in arrival order.

Author: Al Numan
"""

__version__ = "0.1.0"
__author__ = "Al Numan"
