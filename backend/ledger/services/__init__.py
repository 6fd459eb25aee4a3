"""Services Layer — entity store, payment engine, deposit guard, reporting engine.

Invariants:
    - Services own transactions: they commit or roll back the session they are given
    - Policy decisions delegated to core/ (pure functions)

Design Decisions:
    - One class per component, constructed per request around its AsyncSession
"""
