"""Exhaustive axiom surveys over a finite sample of primals.

A survey runs one validation predicate over every unordered pair (or
triple) drawn from a collection and tallies the outcome, so a concrete
model can be audited in one call. Summaries go to the 'projgeom.survey'
logger at INFO, individual violations at DEBUG.
"""
from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .config import DEFAULT_SURVEY_CONFIG, SurveyConfig
from .logging_utils import get_logger
from .plane import check_plane_axiom, collinear


@dataclass
class AxiomSurvey:
    name: str
    checked: int = 0
    passed: int = 0
    failed: int = 0
    elapsed: float = 0.0  # seconds
    violations: List[Tuple[Any, ...]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'checked': self.checked,
            'passed': self.passed,
            'failed': self.failed,
            'pass_rate': (self.passed / self.checked) if self.checked else 0.0,
            'elapsed': self.elapsed,
            'recorded_violations': len(self.violations),
        }


def _run(name: str, predicate: Callable[..., bool], cases: Iterable[Tuple[Any, ...]],
         cfg: SurveyConfig) -> AxiomSurvey:
    logger = get_logger('projgeom.survey')
    result = AxiomSurvey(name=name)
    t0 = time.perf_counter()
    for case in cases:
        result.checked += 1
        if predicate(*case):
            result.passed += 1
            continue
        result.failed += 1
        logger.debug("%s violated by %r", name, case)
        if len(result.violations) < cfg.max_recorded_violations:
            result.violations.append(case)
    result.elapsed = time.perf_counter() - t0
    logger.info("%s: %d checked, %d passed, %d failed", name, result.checked, result.passed, result.failed)
    return result


def survey_plane_axiom(primals: Iterable[Any], config: Optional[SurveyConfig] = None) -> AxiomSurvey:
    """Run check_plane_axiom on every unordered pair of ``primals``.

    With ``config.include_degenerate`` each value is also paired with itself.
    """
    cfg = config or DEFAULT_SURVEY_CONFIG
    items = list(primals)
    if cfg.include_degenerate:
        cases = itertools.combinations_with_replacement(items, 2)
    else:
        cases = itertools.combinations(items, 2)
    return _run('plane_axiom', check_plane_axiom, cases, cfg)


def survey_collinear(primals: Iterable[Any], config: Optional[SurveyConfig] = None) -> AxiomSurvey:
    """Run collinear on every unordered triple of ``primals``.

    Meant for samples expected to lie on one common dual (a range of points
    on a line, or a pencil of lines through a point).
    """
    cfg = config or DEFAULT_SURVEY_CONFIG
    cases = itertools.combinations(list(primals), 3)
    return _run('collinear', collinear, cases, cfg)


def format_survey_table(surveys: Mapping[str, AxiomSurvey]) -> str:
    """Return a human readable multi-line table summarizing surveys."""
    if not surveys:
        return "<no surveys>"
    header = ["survey", "checked", "passed", "failed", "pass%", "ms"]
    rows = []
    for key in sorted(surveys.keys()):
        s = surveys[key].to_dict()
        rows.append([
            key, str(s['checked']), str(s['passed']), str(s['failed']),
            f"{s['pass_rate'] * 100.0:6.2f}", f"{s['elapsed'] * 1000.0:8.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            col_w[i] = max(col_w[i], len(v))
    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ['AxiomSurvey', 'survey_plane_axiom', 'survey_collinear', 'format_survey_table']
