"""To-Do API Package — multi-user task lists with per-owner data isolation.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
