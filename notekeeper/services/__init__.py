"""Services — profile and note managers orchestrating IO around core rules.

Invariants:
    - Every operation takes the principal id as an explicit argument
    - Nothing cached between calls: ownership re-resolved from the store each time
"""
