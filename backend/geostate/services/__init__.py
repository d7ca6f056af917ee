"""Services Layer — request-scoped orchestration between routes and infrastructure.

Invariants:
    - One external call per operation (DB query or provider request)
    - Services raise GeoStateError subclasses; routes never build error bodies

Design Decisions:
    - One service module per handler for locality
"""
