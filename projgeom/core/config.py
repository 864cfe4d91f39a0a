"""Configuration objects for the vector algebra and the axiom survey."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import INT64_SAFE_COMPONENT


@dataclass(frozen=True)
class AlgebraConfig:
    """Dispatch settings for the batch vector functions.

    Attributes
    ----------
    int64_safe_bound : int
        Inputs whose components all have magnitude strictly below this bound
        are computed in int64; anything larger falls back to Python ints held
        in object arrays. Cannot exceed INT64_SAFE_COMPONENT.
    """
    int64_safe_bound: int = INT64_SAFE_COMPONENT

    def __post_init__(self):
        if not 0 < self.int64_safe_bound <= INT64_SAFE_COMPONENT:
            raise ValueError(
                f"int64_safe_bound must be in (0, {INT64_SAFE_COMPONENT}], got {self.int64_safe_bound}")


@dataclass(frozen=True)
class SurveyConfig:
    """Preferences for exhaustive axiom surveys.

    - include_degenerate: also check each primal against itself (p, p).
    - max_recorded_violations: cap on failing tuples kept in the result.
    """
    include_degenerate: bool = False
    max_recorded_violations: int = 32

    def __post_init__(self):
        if self.max_recorded_violations < 0:
            raise ValueError(
                f"max_recorded_violations must be non-negative, got {self.max_recorded_violations}")


DEFAULT_ALGEBRA_CONFIG = AlgebraConfig()
DEFAULT_SURVEY_CONFIG = SurveyConfig()

__all__ = ['AlgebraConfig', 'SurveyConfig', 'DEFAULT_ALGEBRA_CONFIG', 'DEFAULT_SURVEY_CONFIG']
