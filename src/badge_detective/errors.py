"""Exception hierarchy for badge-detective.

All exceptions inherit from BadgeDetectiveError (single catch point).
Missing remote data is never an exception; only unusable collaborators are.
"""

from __future__ import annotations


class BadgeDetectiveError(Exception):
    """Base exception for all badge-detective errors."""


class ForgeClientError(BadgeDetectiveError):
    """The forge API client could not be constructed."""
