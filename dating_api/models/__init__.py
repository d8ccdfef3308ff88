"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root for photos and outgoing likes

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from dating_api.models.user import User  # noqa: F401
from dating_api.models.photo import Photo  # noqa: F401
from dating_api.models.like import Like  # noqa: F401
from dating_api.models.message import Message  # noqa: F401
