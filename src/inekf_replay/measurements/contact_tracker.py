#!/usr/bin/env python3
"""
Contact State Tracker
Forwards complete foot-contact sets to the estimator
"""

import logging
from typing import Optional

from .records import ContactSet


_LOG = logging.getLogger(__name__)


class ContactStateTracker:
    """
    Hands each ContactSet to the estimator as a full replacement

    Sets are never merged: legs missing from a new set are simply absent
    from what the estimator receives. Any merge policy belongs to the
    estimator.
    """

    def __init__(self, estimator):
        """
        Initialize tracker

        Args:
            estimator: Estimator receiving set_contacts calls
        """
        self.estimator = estimator
        self._latest: Optional[ContactSet] = None

    @property
    def latest(self) -> Optional[ContactSet]:
        """Most recently forwarded set"""
        return self._latest

    def forward(self, contact_set: ContactSet):
        """Replace the estimator's contact hypothesis with this set"""
        _LOG.debug(
            "Received CONTACT data at t=%.6f, setting %d contact(s)",
            contact_set.timestamp,
            len(contact_set.contacts)
        )
        self.estimator.set_contacts(list(contact_set.contacts))
        self._latest = contact_set
