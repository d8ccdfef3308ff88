"""Database Package — declarative Base shared by all ORM models.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""
