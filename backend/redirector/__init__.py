"""Index Redirector: answers every HTTP request with a redirect to a fixed entry page.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
