"""Services Layer: use cases orchestrating repository calls.

Invariants:
    - Services receive their repository through the constructor
    - Every mutating use case runs inside repository.transaction()
"""
