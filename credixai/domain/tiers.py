"""Three-tier score classification shared by decisions, gauge and waterfall colours"""

from credixai.domain.models import ColorClass, Decision

APPROVE_THRESHOLD = 700
REJECT_THRESHOLD = 650

_TIER_COLORS = {
    Decision.APPROVE: ColorClass.OUTCOME_GOOD,
    Decision.REJECT: ColorClass.OUTCOME_BAD,
    Decision.MANUAL_REVIEW: ColorClass.OUTCOME_WARN,
}


def classify_tier(score: float) -> Decision:
    """
    Map a score to its decision tier.

    Bands:
    - score >= 700:       Approve
    - 650 <= score < 700: Manual Review
    - score < 650:        Reject
    """
    if score >= APPROVE_THRESHOLD:
        return Decision.APPROVE
    elif score < REJECT_THRESHOLD:
        return Decision.REJECT
    else:
        return Decision.MANUAL_REVIEW


def tier_color(score: float) -> ColorClass:
    """Outcome colour for a score, always consistent with classify_tier"""
    return _TIER_COLORS[classify_tier(score)]
