"""Sentry error tracking for analyzer runs."""
import os
from typing import Any

import sentry_sdk

from js_static_analyzer.core.logging import get_logger


def init_sentry(service_name: str = "js-static-analyzer") -> bool:
    """Initialize Sentry when ``SENTRY_DSN`` is set.

    Args:
        service_name: Service tag attached to every event

    Returns:
        True if Sentry was initialized
    """
    def _tag_event(event: Any, hint: Any) -> Any:
        event.setdefault("tags", {})
        event["tags"]["service"] = service_name
        event["tags"]["component"] = "cli"
        return event

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "development")
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=0.0,
        attach_stacktrace=True,
        max_breadcrumbs=50,
        debug=environment == "development",
        before_send=_tag_event,
    )
    sentry_sdk.set_tag("service", service_name)

    get_logger("sentry").info("sentry_initialized", service=service_name, environment=environment)
    return True


def capture_analysis_error(error: BaseException, path: str) -> None:
    """Report a fatal analysis error (no-op when Sentry is not initialized)."""
    sentry_sdk.capture_exception(error, extras={"path": path, "error_type": type(error).__name__})
