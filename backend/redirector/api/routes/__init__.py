"""Route Modules: one file per concern.

Invariants:
    - Each module exposes a register_*(app) function called from main.py
    - Routes never contain domain logic (delegate to core/)
"""
