"""Repositories — SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - Repositories stage changes on the request's AsyncSession and never commit
    - SqlUnitOfWork.save_all() is the only commit point
    - Query methods re-read the database every call (no caching)
"""
