"""Central arity and integer-width constants.

This module centralizes the small numeric limits used across the algebra
so they can be referenced without scattering literals.
"""
from __future__ import annotations

# Homogeneous coordinates of the projective plane
VECTOR_ARITY: int = 3

# Components strictly below this magnitude keep every batch product sum
# inside int64 (3 * 2**60 < 2**63)
INT64_SAFE_COMPONENT: int = 2 ** 30

__all__ = [
    'VECTOR_ARITY',
    'INT64_SAFE_COMPONENT',
]
