"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "paycheck-planner", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "paycheck-planner") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule(
    request_id: str,
    endpoint: str,
    period_count: int,
    unassigned_count: int,
    unassigned_total: float,
    duration_ms: float,
) -> None:
    """Log structured scheduling outcome for analysis"""
    logging.info(
        "Schedule request completed",
        extra={
            "request_id": request_id,
            "step": "schedule_complete",
            "endpoint": endpoint,
            "period_count": period_count,
            "unassigned_count": unassigned_count,
            "unassigned_total": round(unassigned_total, 2),
            "duration_ms": duration_ms,
        },
    )
