"""POST /v1/explanation - natural-language explanation of a borrower's score"""

import time
from fastapi import APIRouter, Depends

from credixai.api.v1.schemas import BorrowerInputSchema, ExplanationResponse
from credixai.api.dependencies import get_explanation_client, get_request_id
from credixai.domain.scoring import evaluate_borrower
from credixai.infrastructure.clients.explainer import ExplanationClient
from credixai.infrastructure.observability.logging import log_explanation

router = APIRouter()


@router.post("/explanation", response_model=ExplanationResponse)
async def explain_borrower(
    request_body: BorrowerInputSchema,
    request_id: str = Depends(get_request_id),
    explanation_client: ExplanationClient = Depends(get_explanation_client),
):
    """
    Score a borrower, then ask the text-generation service to explain it.

    A missing API key or a failed call still returns 200 with the fixed
    fallback text; `status` tells the two apart.
    """
    start_time = time.time()

    result = evaluate_borrower(request_body.to_domain())
    explanation = await explanation_client.explain(result)

    duration_ms = (time.time() - start_time) * 1000
    log_explanation(request_id, explanation.status.value, duration_ms)

    return ExplanationResponse(
        score=result.score,
        decision=result.decision,
        explanation=explanation.text,
        status=explanation.status,
    )
