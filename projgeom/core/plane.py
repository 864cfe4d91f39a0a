"""Validation predicates over any primal/dual pair.

Every function here is written once against :mod:`projgeom.core.duality`
and works for any concrete model, in either role: passing lines instead of
points checks the dual statement. All predicates are total and pure; a
failed geometric relation is reported by returning False.

Equal arguments (``p == q``) are accepted without special handling; what
the predicates return for them is decided by the model's own ``meet`` and
``incident``.
"""
from __future__ import annotations

import logging

from .duality import Dual, LineT, Primal, PointT

logger = logging.getLogger(__name__)

__all__ = [
    'check_plane_axiom', 'collinear', 'concurrent',
    'check_incidence_symmetry', 'check_axiom',
]


def check_plane_axiom(pt_p: Primal[LineT], pt_q: Primal[LineT]) -> bool:
    """Check that ``pt_p`` and ``pt_q`` determine one line incident to both.

    The meet is computed in both orders; if the two results differ the
    model's meet is order dependent for this pair and the axiom fails.
    Otherwise the common line must pass through both points.
    """
    ln_l = pt_p.meet(pt_q)
    ln_m = pt_q.meet(pt_p)
    if ln_l != ln_m:
        logger.debug("meet is order dependent: %r.meet(%r) = %r but reversed = %r",
                     pt_p, pt_q, ln_l, ln_m)
        return False
    if not (ln_l.incident(pt_p) and ln_l.incident(pt_q)):
        logger.debug("meet %r of %r and %r is not incident to both", ln_l, pt_p, pt_q)
        return False
    return True


def collinear(pt_p: Primal[LineT], pt_q: Primal[LineT], pt_r: PointT) -> bool:
    """Whether ``pt_r`` lies on the meet of ``pt_p`` and ``pt_q``.

    Symmetric in the three arguments only when the model's meet is
    commutative, i.e. when check_plane_axiom holds for ``(pt_p, pt_q)``.
    """
    return pt_p.meet(pt_q).incident(pt_r)


def concurrent(ln_l: Dual[PointT], ln_m: Dual[PointT], ln_n: LineT) -> bool:
    """Dual of collinear: whether ``ln_n`` passes through where ``ln_l`` and ``ln_m`` cross."""
    return ln_l.meet(ln_m).incident(ln_n)


def check_incidence_symmetry(pt_p: Primal[LineT], ln_l: LineT) -> bool:
    """Incidence must read the same from both sides: ``p.incident(l) == l.incident(p)``."""
    ok = pt_p.incident(ln_l) == ln_l.incident(pt_p)
    if not ok:
        logger.debug("incidence of %r and %r is not symmetric", pt_p, ln_l)
    return ok


def check_axiom(pt_p: Primal[LineT], pt_q: Primal[LineT], ln_l: LineT) -> bool:
    """Combined check: symmetric incidence of ``(pt_p, ln_l)`` and the plane axiom for ``(pt_p, pt_q)``."""
    return check_incidence_symmetry(pt_p, ln_l) and check_plane_axiom(pt_p, pt_q)
