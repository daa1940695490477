"""Prometheus metrics for monitoring score distribution, decisions and explanation calls"""

from prometheus_client import Counter, Histogram

from credixai.domain.models import ExplanationStatus, PredictionResult

# Evaluation metrics
evaluation_counter = Counter(
    "credixai_evaluation_total",
    "Total borrower evaluations",
    ["decision"],  # Approve | Reject | Manual Review
)

score_histogram = Histogram(
    "credixai_score",
    "Distribution of final credit scores",
    buckets=[350, 400, 450, 500, 550, 600, 650, 700, 750, 800, 850],
)

# Explanation metrics
explanation_counter = Counter(
    "credixai_explanation_total",
    "Explanation requests by outcome",
    ["status"],  # generated | not_configured | failed
)

explanation_latency_histogram = Histogram(
    "credixai_explanation_latency_seconds",
    "Text-generation service response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(result: PredictionResult) -> None:
    """Record decision tier and score for monitoring approval rates"""
    evaluation_counter.labels(decision=result.decision.value).inc()
    score_histogram.observe(result.score)


def record_explanation(status: ExplanationStatus) -> None:
    explanation_counter.labels(status=status.value).inc()
