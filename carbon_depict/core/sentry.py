"""Centralised Sentry initialisation for processes that run the calculation core."""

import sentry_sdk
import structlog

logger = structlog.get_logger()


def init_sentry(
    dsn: str | None,
    environment: str = "development",
    release: str | None = None,
) -> bool:
    """Initialise Sentry so errors reported through error_response are captured.

    No-op when dsn is None or empty, so it is safe to call unconditionally.
    Returns whether Sentry was enabled.
    """
    if not dsn:
        logger.warning("sentry_disabled", reason="SENTRY_DSN not set")
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        traces_sample_rate=0.0,
        # Frame locals hold whole records (disclosure text, client names)
        include_local_variables=False,
        send_default_pii=False,      # GDPR: never send PII
    )
    sentry_sdk.set_tag("component", "calculation_core")
    logger.info("sentry_initialized", environment=environment, release=release)
    return True
