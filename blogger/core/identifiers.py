"""
Identifier canonicalisation.

Ids reach the application as UUID objects (ORM rows), as strings (URL
paths, the session cookie) or not at all. Every lookup and every ownership
check goes through these two functions so the representations never get
compared directly.

Dependencies: uuid (stdlib)
System role: Single source of truth for id equality
"""

from typing import Any
from uuid import UUID


def canonical_id(value: Any) -> UUID | None:
    """
    Convert an id in any representation to a UUID.

    Args:
        value: UUID, string form of a UUID, or anything else

    Returns:
        UUID | None: Parsed UUID, None for missing or malformed input
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            return None
    if not isinstance(value, str):
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


def same_id(left: Any, right: Any) -> bool:
    """
    Compare two ids after canonicalisation.

    A missing or malformed id is never equal to anything, including
    another missing id.
    """
    left_id = canonical_id(left)
    if left_id is None:
        return False
    return left_id == canonical_id(right)
