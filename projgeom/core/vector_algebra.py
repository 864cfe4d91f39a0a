"""Integer vector algebra on homogeneous coordinates.

Scalar functions work on single length-3 integer vectors and return plain
Python ints, so arithmetic never wraps: the overflow policy throughout this
module is wide-integer arithmetic.

The ``*_batch`` variants apply the same operations row-wise to ``(N, 3)``
integer arrays. They run in int64 when every component is small enough for
the result to fit and otherwise fall back to object arrays of Python ints,
so they agree exactly with the scalar functions on any input.
"""
from __future__ import annotations

import logging
import operator
from typing import Iterable, NamedTuple, Optional, Sequence, Union

import numpy as np

from .config import AlgebraConfig, DEFAULT_ALGEBRA_CONFIG
from .constants import VECTOR_ARITY

logger = logging.getLogger(__name__)

__all__ = [
    'Vector3', 'as_vector3', 'dot', 'cross', 'plucker',
    'dot_batch', 'cross_batch', 'plucker_batch',
]


class Vector3(NamedTuple):
    """Homogeneous coordinates (or combination coefficients) of exactly three ints.

    Only negation is vector arithmetic; ``+`` and ``*`` keep their tuple
    meaning (concatenation, repetition). Use plucker for linear combinations.
    """
    x: int
    y: int
    z: int

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)


VectorLike = Union[Vector3, Sequence[int], np.ndarray]


def _component(c) -> int:
    """Coerce one coordinate to a Python int; bools and floats are rejected."""
    if isinstance(c, (bool, np.bool_)):
        raise TypeError(f"expected an integer component, got {type(c).__name__}")
    return operator.index(c)


def as_vector3(v: Union[VectorLike, Iterable[int]]) -> Vector3:
    """Normalize a length-3 integer sequence into a Vector3.

    Raises
    ------
    ValueError
        If ``v`` does not hold exactly three components.
    TypeError
        If a component is not integral (floats and bools are rejected, numpy
        integer scalars are accepted).
    """
    comps = tuple(v)
    if len(comps) != VECTOR_ARITY:
        raise ValueError(f"expected {VECTOR_ARITY} components, got {len(comps)}")
    return Vector3(*(_component(c) for c in comps))


def dot(a: VectorLike, b: VectorLike) -> int:
    """Dot product ``a[0]*b[0] + a[1]*b[1] + a[2]*b[2]``."""
    a = as_vector3(a); b = as_vector3(b)
    return a.x*b.x + a.y*b.y + a.z*b.z


def cross(a: VectorLike, b: VectorLike) -> Vector3:
    """Cross product; anti-commutative, orthogonal to both inputs."""
    a = as_vector3(a); b = as_vector3(b)
    return Vector3(
        a.y*b.z - a.z*b.y,
        a.z*b.x - a.x*b.z,
        a.x*b.y - a.y*b.x,
    )


def plucker(a: VectorLike, lambda_: int, b: VectorLike, mu: int) -> Vector3:
    """Linear combination ``lambda_*a + mu*b`` computed elementwise.

    Parameterizes the pencil of points (or lines) spanned by ``a`` and ``b``.
    """
    a = as_vector3(a); b = as_vector3(b)
    lam = _component(lambda_); m = _component(mu)
    return Vector3(
        lam*a.x + m*b.x,
        lam*a.y + m*b.y,
        lam*a.z + m*b.z,
    )


# ============================================================================
# BATCH VARIANTS (int64 when safe, Python ints otherwise)
# ============================================================================

def _as_rows(a, name: str) -> np.ndarray:
    arr = np.atleast_2d(np.asarray(a))
    if arr.ndim != 2 or arr.shape[1] != VECTOR_ARITY:
        raise ValueError(f"{name} must be (N, {VECTOR_ARITY}), got shape {arr.shape}")
    if arr.dtype == object:
        # same per-component check as the scalar path
        return np.vectorize(_component, otypes=[object])(arr)
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"{name} must hold integers, got dtype {arr.dtype}")
    return arr


def _fits(arr: np.ndarray, bound: int) -> bool:
    if arr.size == 0:
        return True
    return -bound < int(arr.min()) and int(arr.max()) < bound


def _promote(arrays, scalars=(), config: Optional[AlgebraConfig] = None):
    """Cast all operands to a common dtype: int64 if every value is under the
    safe bound, else object (Python ints)."""
    cfg = config or DEFAULT_ALGEBRA_CONFIG
    bound = cfg.int64_safe_bound
    if all(_fits(a, bound) for a in arrays) and all(-bound < s < bound for s in scalars):
        return [a.astype(np.int64) for a in arrays]
    logger.debug("batch operands exceed |%d|; using Python int arithmetic", bound)
    return [a.astype(object) for a in arrays]


def dot_batch(a, b, config: Optional[AlgebraConfig] = None) -> np.ndarray:
    """Row-wise dot product of broadcastable ``(N, 3)`` integer arrays.

    Returns an ``(N,)`` array.
    """
    a, b = _promote([_as_rows(a, 'a'), _as_rows(b, 'b')], config=config)
    return a[:, 0]*b[:, 0] + a[:, 1]*b[:, 1] + a[:, 2]*b[:, 2]


def cross_batch(a, b, config: Optional[AlgebraConfig] = None) -> np.ndarray:
    """Row-wise cross product of broadcastable ``(N, 3)`` integer arrays."""
    a, b = _promote([_as_rows(a, 'a'), _as_rows(b, 'b')], config=config)
    return np.stack([
        a[:, 1]*b[:, 2] - a[:, 2]*b[:, 1],
        a[:, 2]*b[:, 0] - a[:, 0]*b[:, 2],
        a[:, 0]*b[:, 1] - a[:, 1]*b[:, 0],
    ], axis=1)


def plucker_batch(a, lambda_: int, b, mu: int, config: Optional[AlgebraConfig] = None) -> np.ndarray:
    """Row-wise ``lambda_*a + mu*b`` for broadcastable ``(N, 3)`` integer arrays."""
    lam = _component(lambda_); m = _component(mu)
    a, b = _promote([_as_rows(a, 'a'), _as_rows(b, 'b')], scalars=(lam, m), config=config)
    return lam*a + m*b
