"""Services Layer — operation handlers and operation dispatch.

Invariants:
    - Handlers split by group: QueryHandlers (read), MutationHandlers (write)
    - Operation dispatch uses explicit dict mapping (no auto-discovery)
    - Stateless per call: all state lives in the task store
"""
