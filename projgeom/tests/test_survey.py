"""Exhaustive surveys over finite samples of primals."""
import logging

import pytest

from projgeom.core.config import SurveyConfig
from projgeom.core.survey import AxiomSurvey, format_survey_table, survey_collinear, survey_plane_axiom
from projgeom.tests.models import FANO_LINE_OBJS, FANO_LINES, FANO_POINTS, HomPoint, OrderedPoint


class TestSurveyPlaneAxiom:

    def test_fano_points_all_pass(self):
        s = survey_plane_axiom(FANO_POINTS)
        assert s.checked == 21
        assert s.passed == 21
        assert s.ok
        assert s.violations == []

    def test_fano_lines_all_pass(self):
        assert survey_plane_axiom(FANO_LINE_OBJS).ok

    def test_include_degenerate_adds_self_pairs(self):
        s = survey_plane_axiom(FANO_POINTS, SurveyConfig(include_degenerate=True))
        assert s.checked == 21 + 7
        assert s.ok

    def test_order_dependent_model_fails_every_distinct_pair(self):
        pts = [OrderedPoint(c) for c in "abcde"]
        s = survey_plane_axiom(pts)
        assert s.checked == 10
        assert s.failed == 10
        assert not s.ok
        assert s.violations[0] == (pts[0], pts[1])

    def test_violation_cap(self):
        pts = [OrderedPoint(c) for c in "abcdef"]
        s = survey_plane_axiom(pts, SurveyConfig(max_recorded_violations=3))
        assert s.failed == 15
        assert len(s.violations) == 3

    def test_accepts_generators(self):
        s = survey_plane_axiom(HomPoint(i, 1, 1) for i in range(4))
        assert s.checked == 6 and s.ok

    def test_empty_and_single(self):
        assert survey_plane_axiom([]).checked == 0
        assert survey_plane_axiom([HomPoint(0, 0, 1)]).checked == 0

    def test_summary_logged(self, caplog):
        family = logging.getLogger("projgeom")
        family.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.INFO, logger="projgeom"):
                survey_plane_axiom(FANO_POINTS)
        finally:
            family.removeHandler(caplog.handler)
        assert any("plane_axiom: 21 checked" in r.getMessage() for r in caplog.records)


class TestSurveyCollinear:

    def test_points_of_one_line(self):
        pts = [FANO_POINTS[i] for i in sorted(FANO_LINES[0])]
        s = survey_collinear(pts)
        assert s.checked == 1 and s.ok

    def test_whole_fano_plane(self):
        s = survey_collinear(FANO_POINTS, SurveyConfig(max_recorded_violations=0))
        assert s.checked == 35
        assert s.passed == 7
        assert s.failed == 28
        assert s.violations == []

    def test_range_of_points(self):
        s = survey_collinear(HomPoint(i, 2 * i + 1, 1) for i in range(5))
        assert s.checked == 10 and s.ok


class TestReporting:

    def test_to_dict(self):
        d = AxiomSurvey(name='x', checked=4, passed=3, failed=1).to_dict()
        assert d['pass_rate'] == pytest.approx(0.75)
        assert d['recorded_violations'] == 0
        assert AxiomSurvey(name='empty').to_dict()['pass_rate'] == 0.0

    def test_format_table(self):
        table = format_survey_table({
            'fano': survey_plane_axiom(FANO_POINTS),
            'ordered': survey_plane_axiom([OrderedPoint('a'), OrderedPoint('b')]),
        })
        lines = table.splitlines()
        assert lines[0].split() == ["survey", "checked", "passed", "failed", "pass%", "ms"]
        assert lines[2].split()[:4] == ["fano", "21", "21", "0"]
        assert lines[3].split()[:4] == ["ordered", "1", "0", "1"]

    def test_format_empty(self):
        assert format_survey_table({}) == "<no surveys>"
