"""Database Metadata — SQLAlchemy Base shared by models and infrastructure.

Invariants:
    - Holds declarative metadata only; engines live in infrastructure/database.py
"""
