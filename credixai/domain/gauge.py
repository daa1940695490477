"""Gauge normalization for the semicircular score display"""

from credixai.domain.models import GaugeReading
from credixai.domain.scoring import MIN_SCORE, SCORE_SPAN
from credixai.domain.tiers import tier_color
from credixai.utils.number_utils import clamp


def gauge_percentage(score: float) -> float:
    """Share of the 300-850 range covered by the score, as 0-100"""
    return clamp((score - MIN_SCORE) / SCORE_SPAN * 100, 0, 100)


def build_gauge(score: int) -> GaugeReading:
    return GaugeReading(
        score=score,
        percentage=gauge_percentage(score),
        color_class=tier_color(score),
    )
