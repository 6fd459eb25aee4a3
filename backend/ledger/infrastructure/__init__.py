"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic except the error types
    - All driver exceptions mapped to LedgerError subclasses before leaving this layer
"""
