"""Exception types for the bonding-curve engine."""

from __future__ import annotations


class DomainError(ValueError):
    """Raised when an input falls outside the domain of the curve math.

    Covers zero or negative denominators, negative amounts, malformed reserve
    records and quotes against a completed curve. Operations that raise this
    leave any owned reserve state untouched.
    """
