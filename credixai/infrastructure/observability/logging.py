"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from credixai.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_evaluation(
    request_id: str,
    score: int,
    decision: str,
    probability: float,
    duration_ms: float,
) -> None:
    """Log structured scoring outcome for analysis"""
    logging.info(
        "Evaluation completed",
        extra={
            "request_id": request_id,
            "step": "evaluation_complete",
            "score": score,
            "decision": decision,
            "risk_probability": round(probability, 4),
            "duration_ms": duration_ms,
        },
    )


def log_explanation(request_id: str, status: str, duration_ms: float) -> None:
    """Log outcome of a text-generation round trip"""
    logging.info(
        "Explanation completed",
        extra={
            "request_id": request_id,
            "step": "explanation_complete",
            "explanation_status": status,
            "duration_ms": duration_ms,
        },
    )
