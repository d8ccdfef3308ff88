"""Services Layer — async orchestration around the pure rules in core/.

Invariants:
    - Services load through repositories, apply core rules, then commit via UnitOfWork
    - Every mutator commits at most once and raises before committing on rule violations

Design Decisions:
    - One service class per aggregate (discovery, likes, mailbox, photos, users)
    - Dependencies passed in explicitly; api/dependencies.py wires the SQL implementations
"""
