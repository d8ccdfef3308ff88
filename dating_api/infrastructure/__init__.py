"""Infrastructure Layer — database sessions and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Storage exceptions are mapped to core error types before leaving this layer
"""
