"""Structured logging for upstream source fetches."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredSourceLogger:
    """Structured logger for upstream source calls."""

    def log_fetch(
        self,
        source: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one upstream fetch with structured data."""
        log_data: dict[str, Any] = {
            "source": source,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Source fetch: {source} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
