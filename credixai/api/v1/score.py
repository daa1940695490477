"""POST /v1/score - credit score, decision and attribution endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from credixai.api.v1.schemas import (
    BorrowerInputSchema,
    ContributionSchema,
    GaugeSchema,
    ScoreResponse,
    TopFactorSchema,
    WaterfallBarSchema,
)
from credixai.api.dependencies import get_request_id
from credixai.config import settings
from credixai.domain.explanation import top_factors
from credixai.domain.gauge import build_gauge
from credixai.domain.scoring import evaluate_borrower
from credixai.domain.waterfall import waterfall_for
from credixai.infrastructure.observability.metrics import record_evaluation
from credixai.infrastructure.observability.logging import log_evaluation
from credixai.utils.number_utils import format_points

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def score_borrower(
    request_body: BorrowerInputSchema,
    request_id: str = Depends(get_request_id),
):
    """
    Score a borrower and decompose the score into feature contributions.

    Flow:
    1. Evaluate the six feature impacts and aggregate the score
    2. Classify the decision tier and risk probability
    3. Lay out waterfall bars and the gauge reading
    4. Return everything the dashboard renders
    """
    start_time = time.time()

    try:
        result = evaluate_borrower(request_body.to_domain())
        waterfall = waterfall_for(result)
        gauge = build_gauge(result.score)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(result)
    log_evaluation(request_id, result.score, result.decision.value, result.probability, duration_ms)

    return ScoreResponse(
        score=result.score,
        decision=result.decision,
        probability=result.probability,
        base_value=result.base_value,
        shap_values=[ContributionSchema.from_domain(c) for c in result.shap_values],
        top_factors=[
            TopFactorSchema(feature=c.feature, points=format_points(c.value))
            for c in top_factors(result, settings.top_factor_count)
        ],
        waterfall=[WaterfallBarSchema.from_domain(bar) for bar in waterfall],
        gauge=GaugeSchema.from_domain(gauge),
    )
