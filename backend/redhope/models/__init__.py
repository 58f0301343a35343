"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so metadata is complete before create_all / autogenerate
"""

from redhope.models.user import User  # noqa: F401
from redhope.models.donation_request import DonationRequest  # noqa: F401
from redhope.models.funding import Funding  # noqa: F401
