"""Domain models - immutable dataclasses for borrower input, attribution and chart geometry"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
from credixai.utils.number_utils import format_points


class Decision(str, Enum):
    """Decision tier derived from the final score"""

    APPROVE = "Approve"
    REJECT = "Reject"
    MANUAL_REVIEW = "Manual Review"


class ColorClass(str, Enum):
    """Semantic colour of a waterfall bar or the gauge arc"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    OUTCOME_GOOD = "outcome_good"
    OUTCOME_BAD = "outcome_bad"
    OUTCOME_WARN = "outcome_warn"

    @property
    def hex(self) -> str:
        return _PALETTE[self]


_PALETTE = {
    ColorClass.POSITIVE: "#22c55e",  # green-500
    ColorClass.NEGATIVE: "#ef4444",  # red-500
    ColorClass.NEUTRAL: "#94a3b8",  # slate-400
    ColorClass.OUTCOME_GOOD: "#22c55e",
    ColorClass.OUTCOME_BAD: "#ef4444",
    ColorClass.OUTCOME_WARN: "#eab308",  # yellow-500
}


class ExplanationStatus(str, Enum):
    """Outcome of a natural-language explanation request"""

    GENERATED = "generated"
    NOT_CONFIGURED = "not_configured"
    FAILED = "failed"


@dataclass(frozen=True)
class BorrowerInput:
    """Six borrower attributes scored by the attribution engine"""

    income: float
    loan_amount: float
    employment_length: float
    debt_to_income_ratio: float  # 0.0 - 1.0
    credit_history_length: float
    delinquency_count: int


DEFAULT_INPUTS = BorrowerInput(
    income=60000,
    loan_amount=15000,
    employment_length=5,
    debt_to_income_ratio=0.3,
    credit_history_length=8,
    delinquency_count=0,
)


@dataclass(frozen=True)
class FeatureContribution:
    """Signed point contribution of one feature to the score"""

    feature: str
    value: float
    display_value: str
    description: str


@dataclass(frozen=True)
class PredictionResult:
    """Output of one engine evaluation"""

    score: int
    decision: Decision
    probability: float
    base_value: int
    shap_values: Tuple[FeatureContribution, ...]


@dataclass(frozen=True)
class WaterfallBar:
    """Geometry of one bar in the waterfall chart"""

    label: str
    full_label: str
    signed_value: float
    bar_bottom: float
    bar_height: float
    color_class: ColorClass
    is_total: bool = False  # Base and Final bars

    @property
    def bar_top(self) -> float:
        return self.bar_bottom + self.bar_height

    @property
    def impact_text(self) -> str:
        """Tooltip text: totals show the rounded value, feature bars a signed delta"""
        if self.is_total:
            return format_points(self.signed_value, signed=False)
        return format_points(self.signed_value)


@dataclass(frozen=True)
class GaugeReading:
    """Position and colour of the semicircular score gauge"""

    score: int
    percentage: float
    color_class: ColorClass


@dataclass(frozen=True)
class Explanation:
    """Natural-language explanation or its fallback text"""

    text: str
    status: ExplanationStatus

    @property
    def is_fallback(self) -> bool:
        return self.status is not ExplanationStatus.GENERATED
