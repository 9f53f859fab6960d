"""Core Layer — pure predicates and lookups, no IO, no logging, no global state.

Invariants:
    - No module in core/ holds mutable module state or performs IO
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
