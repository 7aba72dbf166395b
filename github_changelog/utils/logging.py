"""Contains structlog configuration for the command line entry point."""

import logging
import sys
from collections.abc import Iterable
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .constants import REDACTED_PLACEHOLDER


class SecretRedactor:
    """structlog processor replacing secrets in every string value of an event."""

    def __init__(self, secrets: Iterable[str]) -> None:
        """Initialize with the secrets to hide; empty values are ignored."""
        self.secrets = [secret for secret in secrets if secret]

    def _redact(self, value: Any) -> Any:
        if isinstance(value, str):
            for secret in self.secrets:
                value = value.replace(secret, REDACTED_PLACEHOLDER)
            return value
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact(item) for item in value)
        if isinstance(value, dict):
            return {key: self._redact(item) for key, item in value.items()}
        return value

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """Redact the event dictionary."""
        if not self.secrets:
            return event_dict
        return {key: self._redact(value) for key, value in event_dict.items()}


def configure_logging(debug: bool = False, secrets: Iterable[str] = ()) -> None:
    """Configure structlog for console output on stderr, hiding ``secrets`` from every log line."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            SecretRedactor(secrets),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
