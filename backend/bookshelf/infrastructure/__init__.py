"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic other than errors
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
"""
