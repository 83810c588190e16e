"""API Schemas — request/response models at the HTTP boundary.

Invariants:
    - Request models accept only the user-settable fields; extras are ignored
    - Response models never render ownership fields or tombstones
"""
