"""Services Layer — IO-bound implementations of the core boundary protocols.

Invariants:
    - Services receive their AsyncSession from the caller
    - Driver exceptions are translated to core/errors.py types here
"""
