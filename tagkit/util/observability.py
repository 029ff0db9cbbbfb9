"""Observability configuration using Logfire.

Tag group operations log through the standard "tagkit" logger, so the
library stays quiet until an application opts in. configure_logfire
configures Logfire and forwards the "tagkit" logger to it.

Usage:
    from tagkit.config import get_settings
    from tagkit.util.observability import configure_logfire

    configure_logfire(get_settings())
"""

import logging

import logfire

from tagkit.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - If token is present, logs will be sent to Logfire cloud by default
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Library settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "tagkit",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    # Forward tagkit log records to Logfire, once
    tagkit_logger = logging.getLogger("tagkit")
    if not any(
        isinstance(h, logfire.LogfireLoggingHandler) for h in tagkit_logger.handlers
    ):
        tagkit_logger.addHandler(logfire.LogfireLoggingHandler())

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
