"""Explanation prompt construction and fallback texts for the text-generation service"""

from typing import List, Sequence

from credixai.domain.models import Decision, FeatureContribution, PredictionResult
from credixai.domain.scoring import MAX_SCORE, MIN_SCORE
from credixai.utils.number_utils import format_points

NOT_CONFIGURED_MESSAGE = "請配置 API Key 以啟用 AI 智慧解釋功能。 (Please configure API_KEY to enable AI explanation.)"
SERVICE_FAILED_MESSAGE = "AI 服務暫時無法使用。請檢查 API Key 或網路連線。"
EMPTY_RESPONSE_MESSAGE = "無法產生解釋，請稍後再試。"

_DECISION_WORDING = {
    Decision.APPROVE: "Approved",
    Decision.REJECT: "Rejected",
    Decision.MANUAL_REVIEW: "Requires manual review",
}


def rank_by_impact(contributions: Sequence[FeatureContribution]) -> List[FeatureContribution]:
    """Contributions by descending absolute impact; ties keep feature order"""
    return sorted(contributions, key=lambda c: abs(c.value), reverse=True)


def top_factors(result: PredictionResult, n: int = 3) -> List[FeatureContribution]:
    return rank_by_impact(result.shap_values)[:n]


def build_explanation_prompt(result: PredictionResult, language: str, highlight: int = 2) -> str:
    """
    Build the analyst prompt sent to the text-generation service.

    Lists every contribution by descending impact and asks for a short,
    friendly summary emphasising the top `highlight` factors.
    """
    factor_lines = "\n".join(
        f"- {c.feature}: {c.display_value} (impact on score: {format_points(c.value)} points)"
        for c in rank_by_impact(result.shap_values)
    )

    return f"""You are a professional bank credit-risk analyst. Based on the output of a personal loan
approval simulator below, write a short, friendly and constructive explanation for the customer.

Answer in {language}.

Model result:
- Final credit score: {result.score} (range {MIN_SCORE}-{MAX_SCORE})
- Decision: {_DECISION_WORDING[result.decision]}

SHAP feature contributions (factors that moved the score, largest first):
{factor_lines}

Task:
1. Summarise why the customer received this result.
2. Emphasise the {highlight} most influential positive or negative factors.
3. If the application was rejected or the score is low, give concrete improvement advice
   (for example lowering the debt-to-income ratio or keeping a clean repayment record).
4. Keep the tone professional but approachable and avoid technical jargon.
5. Keep the reply under 200 words.
"""
