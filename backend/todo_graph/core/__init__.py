"""Core Layer — task store and domain types, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - TodoStore is the only mutable state in the system

Design Decisions:
    - Functional core separated from imperative shell: the shell (api/) owns
      the single store instance and hands it to services by reference
"""
