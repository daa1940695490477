"""Feature impact functions - fixed additive point contributions per borrower attribute"""

import math
from dataclasses import dataclass
from typing import Callable, Tuple

from credixai.domain.models import BorrowerInput, FeatureContribution
from credixai.utils.number_utils import clamp, format_number

# Full width of the score range; an infinite contribution saturates at this size
CONTRIBUTION_LIMIT = 550.0


def income_impact(income: float) -> float:
    """+2.5 points per $1000 above $50k (negative below), capped at +/-100"""
    impact = (income - 50000) / 1000 * 2.5
    return clamp(impact, -100, 100)


def loan_amount_impact(loan_amount: float) -> float:
    """-1 point per $2000 requested"""
    return -(loan_amount / 2000)


def debt_to_income_impact(ratio: float) -> float:
    """
    Debt-to-income ratio is the critical factor.

    - ratio > 0.40: penalty of 400 points per unit above 0.40
    - ratio < 0.30: bonus of 150 points per unit below 0.30
    - 0.30 - 0.40:  neutral
    """
    if ratio > 0.40:
        return -((ratio - 0.40) * 400)
    elif ratio < 0.30:
        return (0.30 - ratio) * 150
    return 0.0


def employment_length_impact(years: float) -> float:
    """+3 points per year employed, up to 30"""
    return min(years * 3, 30)


def credit_history_impact(years: float) -> float:
    """+2 points per year of credit history, up to 40"""
    return min(years * 2, 40)


def delinquency_impact(count: int) -> float:
    """-60 points per late payment"""
    return -(count * 60)


def _as_float(value: float) -> float:
    """Widen to float; integers beyond float range become signed infinity"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _finite(value: float) -> float:
    """NaN contributes nothing; infinities saturate at CONTRIBUTION_LIMIT"""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(CONTRIBUTION_LIMIT, value)
    return float(value)


@dataclass(frozen=True)
class Feature:
    """Static description of one scored attribute"""

    field: str
    name: str
    description: str
    impact: Callable[[float], float]
    display: Callable[[float], str]

    def contribution(self, borrower: BorrowerInput) -> FeatureContribution:
        raw = getattr(borrower, self.field)
        return FeatureContribution(
            feature=self.name,
            value=_finite(self.impact(_as_float(raw))),
            display_value=self.display(raw),
            description=self.description,
        )


def _money(value: float) -> str:
    return f"${format_number(value)}"


def _percent(ratio: float) -> str:
    return f"{_as_float(ratio) * 100:.1f}%"


def _years(value: float) -> str:
    return f"{format_number(value, grouping=False)} 年"


def _times(value: float) -> str:
    return f"{format_number(value, grouping=False)} 次"


# Fixed order consumed positionally by the waterfall and explanation text
FEATURES: Tuple[Feature, ...] = (
    Feature("income", "年收入 (Income)", "借款人的年收入水平", income_impact, _money),
    Feature("loan_amount", "貸款金額 (Loan Amount)", "申請的貸款總額", loan_amount_impact, _money),
    Feature("debt_to_income_ratio", "負債比 (DTI Ratio)", "每月債務佔收入的比例", debt_to_income_impact, _percent),
    Feature("employment_length", "就業年資 (Employment)", "目前工作的持續時間", employment_length_impact, _years),
    Feature("credit_history_length", "信用歷史 (History)", "最早信用帳戶至今的時間", credit_history_impact, _years),
    Feature("delinquency_count", "違約次數 (Delinquency)", "過去兩年內的遲繳紀錄", delinquency_impact, _times),
)


def calculate_contributions(borrower: BorrowerInput) -> Tuple[FeatureContribution, ...]:
    """Evaluate every feature independently, in fixed feature order"""
    return tuple(feature.contribution(borrower) for feature in FEATURES)
