"""Freelance Ledger — profiles, contracts, jobs and the money that moves between them.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
