"""Core Layer: pure domain logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Value objects are immutable once constructed
"""
