"""Primal/dual capability contract of a projective plane.

``Primal[D]`` describes a type (conventionally a point) that can be tested
for incidence with a ``D`` and meets another value of its own type in a
``D``. ``Dual[P]`` is the mirror role (conventionally a line, whose meet is
the join). The two protocols reference each other only through their type
parameters; concrete models implement the methods structurally and never
inherit from these classes.

A pair ``(Point, Line)`` is a valid model when ``Point`` satisfies
``Primal[Line]`` and ``Line`` satisfies ``Dual[Point]`` at the same time.
The validation functions in :mod:`projgeom.core.plane` bind the pair
through ``LineT``, bounded by ``Dual[Any]``: a type checker confirms that
the point type is a ``Primal[LineT]`` and that ``LineT`` is some dual, but
it does not require ``LineT.incident`` to accept that same point type.
Python type variables cannot carry the recursive bound that would close
the loop, so that half of the pairing rests on the model. Conformance is
a static typing matter; nothing here is runtime checkable.

Because the contract is symmetric, any ``Dual`` is also a ``Primal`` of its
own dual, so validation written for points applies to lines unchanged.
"""
from __future__ import annotations

from typing import Any, Protocol, TypeVar

__all__ = ['Primal', 'Dual', 'PointT', 'LineT']

_D = TypeVar('_D')
_P = TypeVar('_P')
_Self = TypeVar('_Self')


class Primal(Protocol[_D]):
    """Point-like role with respect to the dual type ``_D``."""

    def __eq__(self, other: object, /) -> bool: ...

    def incident(self, dual: _D, /) -> bool:
        """Whether this value lies on ``dual``."""
        ...

    def meet(self: _Self, other: _Self, /) -> _D:
        """The dual value determined by this value and ``other``."""
        ...


class Dual(Protocol[_P]):
    """Line-like role with respect to the primal type ``_P``."""

    def __eq__(self, other: object, /) -> bool: ...

    def incident(self, primal: _P, /) -> bool:
        """Whether ``primal`` lies on this value."""
        ...

    def meet(self: _Self, other: _Self, /) -> _P:
        """The primal value where this value and ``other`` cross."""
        ...


# Call-site bindings for generic validation functions
LineT = TypeVar('LineT', bound='Dual[Any]')
PointT = TypeVar('PointT', bound='Primal[Any]')
