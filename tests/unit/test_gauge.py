"""Unit tests for gauge normalization"""

import pytest
from credixai.domain.gauge import build_gauge, gauge_percentage
from credixai.domain.models import ColorClass


def test_gauge_percentage_range_endpoints():
    """Test the score range maps onto 0-100"""
    assert gauge_percentage(300) == 0
    assert gauge_percentage(850) == 100
    assert gauge_percentage(575) == pytest.approx(50)


def test_gauge_percentage_clamped():
    """Test scores outside the range stay on the arc"""
    assert gauge_percentage(200) == 0
    assert gauge_percentage(900) == 100


def test_build_gauge_default_score():
    """Test default score 669 sits at ~67% in the warning colour"""
    gauge = build_gauge(669)

    assert gauge.score == 669
    assert gauge.percentage == pytest.approx(369 / 550 * 100)
    assert gauge.color_class == ColorClass.OUTCOME_WARN
