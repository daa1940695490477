"""Waterfall decomposition - stacked bar geometry for the contribution chart"""

from itertools import accumulate
from typing import List, Sequence

from credixai.domain.models import ColorClass, FeatureContribution, PredictionResult, WaterfallBar
from credixai.domain.tiers import tier_color

BASE_LABEL = "Base"
BASE_FULL_LABEL = "Base Score (起始分)"
FINAL_LABEL = "Final"
FINAL_FULL_LABEL = "Final Score (最終分)"


def _contribution_bar(contribution: FeatureContribution, previous: float, current: float) -> WaterfallBar:
    # Positive bars rise from the previous total, negative bars hang down to the new one
    is_positive = contribution.value >= 0
    return WaterfallBar(
        label=contribution.feature.split(" ")[0],
        full_label=contribution.feature,
        signed_value=contribution.value,
        bar_bottom=previous if is_positive else current,
        bar_height=abs(contribution.value),
        color_class=ColorClass.POSITIVE if is_positive else ColorClass.NEGATIVE,
    )


def build_waterfall(
    base_value: float,
    contributions: Sequence[FeatureContribution],
    final_score: float,
) -> List[WaterfallBar]:
    """
    Lay out a waterfall chart from base value to final score.

    Each contribution bar spans between the running total before and
    after it, so consecutive bars always touch. Base spans [0, base_value]
    and Final spans [0, final_score], coloured by the score's tier.

    Contributions are taken in the order given; sorting by magnitude is a
    display concern of the caller.

    Example:
        base 620, contributions [+25, -7.5], final 638
        → Base [0, 620], +25 [620, 645], -7.5 [637.5, 645], Final [0, 638]
    """
    totals = list(accumulate((c.value for c in contributions), initial=base_value))

    base_bar = WaterfallBar(
        label=BASE_LABEL,
        full_label=BASE_FULL_LABEL,
        signed_value=base_value,
        bar_bottom=0,
        bar_height=base_value,
        color_class=ColorClass.NEUTRAL,
        is_total=True,
    )
    final_bar = WaterfallBar(
        label=FINAL_LABEL,
        full_label=FINAL_FULL_LABEL,
        signed_value=final_score,
        bar_bottom=0,
        bar_height=final_score,
        color_class=tier_color(final_score),
        is_total=True,
    )

    contribution_bars = [
        _contribution_bar(contribution, previous, current)
        for contribution, previous, current in zip(contributions, totals, totals[1:])
    ]

    return [base_bar, *contribution_bars, final_bar]


def waterfall_for(result: PredictionResult) -> List[WaterfallBar]:
    """Waterfall geometry for an engine result"""
    return build_waterfall(result.base_value, result.shap_values, result.score)
