"""GeoState Application Package — state geodata pages and a Mapbox geocoding proxy.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
