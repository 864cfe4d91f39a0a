"""Public package API for the projgeom toolkit.

This facade provides a flat import surface on top of the internal
implementation package ``projgeom.core``.

Example
-------
    from projgeom import cross, dot, check_plane_axiom, collinear

The deeper modules (``projgeom.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("projgeom")
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core import config, constants, duality, plane, survey, vector_algebra
from .core.config import AlgebraConfig, SurveyConfig
from .core.constants import INT64_SAFE_COMPONENT, VECTOR_ARITY
from .core.duality import Dual, LineT, PointT, Primal
from .core.logging_utils import configure_logging, get_logger
from .core.plane import check_axiom, check_incidence_symmetry, check_plane_axiom, collinear, concurrent
from .core.survey import AxiomSurvey, format_survey_table, survey_collinear, survey_plane_axiom
from .core.vector_algebra import (
    Vector3, as_vector3, cross, cross_batch, dot, dot_batch, plucker, plucker_batch,
)

__all__ = [
    '__version__',
    # vector algebra
    'Vector3', 'as_vector3', 'dot', 'cross', 'plucker',
    'dot_batch', 'cross_batch', 'plucker_batch',
    # duality contract
    'Primal', 'Dual', 'PointT', 'LineT',
    # validation
    'check_plane_axiom', 'collinear', 'concurrent',
    'check_incidence_symmetry', 'check_axiom',
    # survey
    'AxiomSurvey', 'survey_plane_axiom', 'survey_collinear', 'format_survey_table',
    # config / constants / logging
    'AlgebraConfig', 'SurveyConfig', 'VECTOR_ARITY', 'INT64_SAFE_COMPONENT',
    'configure_logging', 'get_logger',
    # submodules
    'vector_algebra', 'duality', 'plane', 'survey', 'config', 'constants',
]
