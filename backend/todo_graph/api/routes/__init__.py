"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own router with prefix and tags
    - Routes never contain business logic (delegate to services/dispatch)
"""
