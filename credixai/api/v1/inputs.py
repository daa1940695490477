"""GET /v1/inputs - default borrower input and slider ranges"""

from dataclasses import asdict
from fastapi import APIRouter

from credixai.api.v1.schemas import BorrowerInputSchema, InputRange, InputsResponse
from credixai.domain.models import DEFAULT_INPUTS

router = APIRouter()

# Ranges the input form offers; the engine itself accepts any number
INPUT_RANGES = {
    "income": InputRange(min=20000, max=200000, step=1000),
    "loan_amount": InputRange(min=1000, max=50000, step=500),
    "debt_to_income_ratio": InputRange(min=0, max=1, step=0.01),
    "employment_length": InputRange(min=0, max=40, step=1),
    "credit_history_length": InputRange(min=0, max=30, step=1),
    "delinquency_count": InputRange(min=0, max=4, step=1),  # 4 means "4+"
}


@router.get("/inputs", response_model=InputsResponse)
def get_inputs():
    """Defaults and slider bounds for building the input form"""
    return InputsResponse(
        defaults=BorrowerInputSchema(**asdict(DEFAULT_INPUTS)),
        ranges=INPUT_RANGES,
    )
