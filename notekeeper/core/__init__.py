"""Core — pure ownership rules, error taxonomy and tagged results.

Invariants:
    - No IO, no async, no DB access in this package
    - Services (shell) import from core, never the reverse
"""
