"""Domain Types: closed enumerations for roles and lifecycle statuses.

Invariants:
    - Enum values are the exact strings stored and sent over the wire
    - Defaults: Role.DONOR, UserStatus.ACTIVE, DonationStatus.PENDING
"""

from enum import Enum


class Role(str, Enum):
    """User role. Every registration starts as a donor."""
    DONOR = "donor"
    VOLUNTEER = "volunteer"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Account status toggled by administrators."""
    ACTIVE = "active"
    BLOCKED = "blocked"


class DonationStatus(str, Enum):
    """Donation request lifecycle. No transition rules are enforced."""
    PENDING = "pending"
    INPROGRESS = "inprogress"
    DONE = "done"
    CANCELED = "canceled"


DEFAULT_ROLE = Role.DONOR
DEFAULT_USER_STATUS = UserStatus.ACTIVE
DEFAULT_DONATION_STATUS = DonationStatus.PENDING

# Metadata tag attached to every checkout session created by this service
FUNDING_SESSION_TYPE = "funding"
