"""Attribution engine - core business logic turning borrower input into a scored decision"""

import math
from functools import reduce
from typing import Sequence

from credixai.domain.features import calculate_contributions
from credixai.domain.models import BorrowerInput, Decision, FeatureContribution, PredictionResult
from credixai.domain.tiers import classify_tier
from credixai.utils.number_utils import clamp, round_half_up

BASE_SCORE = 620
MIN_SCORE = 300
MAX_SCORE = 850
SCORE_SPAN = MAX_SCORE - MIN_SCORE


def aggregate_score(contributions: Sequence[FeatureContribution], base_value: int = BASE_SCORE) -> int:
    """
    Fold the contributions onto the base value and finalize the score.

    Rounding is half up (668.5 -> 669), applied after clamping to
    [300, 850]. With integer bounds this equals round-then-clamp, and it
    lets an infinite raw total settle on a bound instead of failing.
    """
    raw = reduce(lambda total, contribution: total + contribution.value, contributions, float(base_value))

    if math.isnan(raw):
        raw = float(base_value)

    return round_half_up(clamp(raw, MIN_SCORE, MAX_SCORE))


def determine_decision(score: int) -> Decision:
    """Approve at 700+, Reject below 650, Manual Review in between"""
    return classify_tier(score)


def calculate_risk_probability(score: int) -> float:
    """
    Linear inverse of the score's position in [300, 850].

    Not a calibrated default probability: 300 maps to 1.0, 850 to 0.0.
    """
    return 1 - (score - MIN_SCORE) / SCORE_SPAN


def evaluate_borrower(borrower: BorrowerInput) -> PredictionResult:
    """
    Main entry point: score a borrower and explain the score.

    Returns a fresh PredictionResult with score, decision, probability,
    base value and the six contributions in fixed feature order.
    """
    contributions = calculate_contributions(borrower)
    score = aggregate_score(contributions)

    return PredictionResult(
        score=score,
        decision=determine_decision(score),
        probability=calculate_risk_probability(score),
        base_value=BASE_SCORE,
        shap_values=contributions,
    )
