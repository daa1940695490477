"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List

from credixai.domain.models import (
    BorrowerInput,
    ColorClass,
    Decision,
    ExplanationStatus,
    FeatureContribution,
    GaugeReading,
    WaterfallBar,
)


class BorrowerInputSchema(BaseModel):
    """Request body for POST /v1/score and POST /v1/explanation"""

    model_config = ConfigDict(allow_inf_nan=False)

    income: float = Field(60000, ge=0, description="Annual income")
    loan_amount: float = Field(15000, ge=0, description="Requested loan amount")
    employment_length: float = Field(5, ge=0, description="Years employed")
    debt_to_income_ratio: float = Field(0.3, ge=0, le=1, description="Monthly debt over income, 0.0 - 1.0")
    credit_history_length: float = Field(8, ge=0, description="Years of credit history")
    delinquency_count: int = Field(0, ge=0, description="Late payments in the past two years")

    def to_domain(self) -> BorrowerInput:
        return BorrowerInput(**self.model_dump())


class ContributionSchema(BaseModel):
    """Signed contribution of one feature"""

    feature: str
    value: float
    display_value: str
    description: str

    @classmethod
    def from_domain(cls, contribution: FeatureContribution) -> "ContributionSchema":
        return cls(
            feature=contribution.feature,
            value=contribution.value,
            display_value=contribution.display_value,
            description=contribution.description,
        )


class WaterfallBarSchema(BaseModel):
    """Single bar of the waterfall chart"""

    label: str
    full_label: str
    signed_value: float
    bar_bottom: float
    bar_height: float
    color_class: ColorClass
    color: str
    impact_text: str

    @classmethod
    def from_domain(cls, bar: WaterfallBar) -> "WaterfallBarSchema":
        return cls(
            label=bar.label,
            full_label=bar.full_label,
            signed_value=bar.signed_value,
            bar_bottom=bar.bar_bottom,
            bar_height=bar.bar_height,
            color_class=bar.color_class,
            color=bar.color_class.hex,
            impact_text=bar.impact_text,
        )


class GaugeSchema(BaseModel):
    """Semicircular gauge reading"""

    score: int
    percentage: float
    color_class: ColorClass
    color: str

    @classmethod
    def from_domain(cls, gauge: GaugeReading) -> "GaugeSchema":
        return cls(
            score=gauge.score,
            percentage=gauge.percentage,
            color_class=gauge.color_class,
            color=gauge.color_class.hex,
        )


class TopFactorSchema(BaseModel):
    """Highly influential feature with its rounded signed impact"""

    feature: str
    points: str


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    score: int
    decision: Decision
    probability: float
    base_value: int
    shap_values: List[ContributionSchema]
    top_factors: List[TopFactorSchema]
    waterfall: List[WaterfallBarSchema]
    gauge: GaugeSchema


class ExplanationResponse(BaseModel):
    """Response for POST /v1/explanation"""

    score: int
    decision: Decision
    explanation: str
    status: ExplanationStatus


class InputRange(BaseModel):
    """Slider bounds of one input field"""

    min: float
    max: float
    step: float


class InputsResponse(BaseModel):
    """Response for GET /v1/inputs"""

    defaults: BorrowerInputSchema
    ranges: Dict[str, InputRange]
