"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure and deterministic (time comes from an injected Clock)
    - Async appears only in the storage Protocols the shell implements

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
