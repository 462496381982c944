"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Isbn wraps str — the book primary key is never a bare string in domain logic

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Isbn = NewType("Isbn", str)
