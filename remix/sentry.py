"""
Sentry initialization for centralized error tracking.
Observes reality, never controls logic.
"""
import logging
from typing import Dict, Any

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from remix.config import config
from remix.logger import logger


def initialize_sentry():
    """Initialize Sentry SDK if DSN is configured."""
    if not config.has_sentry:
        logger.info("Sentry not configured, skipping initialization")
        return
    
    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.ENVIRONMENT,
            integrations=[
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
            ],
            traces_sample_rate=0.1,
            send_default_pii=False,
            debug=False,
            before_send=lambda event, hint: _enrich_sentry_event(event, hint)
        )
        
        logger.info("Sentry initialized for error tracking")
        
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")


def _enrich_sentry_event(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """Enrich Sentry events with system context."""
    event.setdefault("tags", {})
    event["tags"]["system"] = "listing-remix"
    event["tags"]["environment"] = config.ENVIRONMENT
    
    # Group by exception type and module
    exceptions = event.get("exception", {}).get("values", [])
    if exceptions:
        exc = exceptions[0]
        event["fingerprint"] = [
            "{{ default }}",
            exc.get("type", "Unknown"),
            exc.get("module", "unknown")
        ]
    
    return event


def capture_pipeline_error(payload_size: int, error: Exception):
    """Capture an unexpected normalization failure in Sentry."""
    if not config.has_sentry:
        return
    
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("error_type", "pipeline")
        scope.set_extra("payload_size", payload_size)
        scope.set_level("error")
        
        sentry_sdk.capture_exception(error)
