"""Logging for the shopping cart.

The domain layer logs through stdlib ``logging`` (``shopping_cart.*`` loggers)
and the drivers through structlog. configure_logging() sends both through one
structlog pipeline that:

- tags stdlib records with the cart component that emitted them
  (``shopping_cart.core.domain.cart.cart`` -> ``cart``);
- renders Decimal amounts as plain strings (``"2.52"``, not ``Decimal('2.52')``).

Only the ``shopping_cart`` logger tree is touched; the host application's
root logger is left alone. The library never calls configure_logging() itself.
"""

from __future__ import annotations

import logging
import os
import sys
from decimal import Decimal
from typing import Any

import structlog

CART_LOGGER_NAME = "shopping_cart"
_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")

_CONFIGURED = False


def decimals_to_str(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def component_from_record(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Derive context_component from the stdlib logger name of a bridged record."""
    record = event_dict.get("_record")
    if record is not None and "context_component" not in event_dict:
        event_dict["context_component"] = record.name.rsplit(".", 1)[-1]
    return event_dict


def configure_logging(level: int | str = logging.INFO) -> None:
    """One-shot setup of the cart's structlog pipeline and its stdlib bridge.

    Safe to call multiple times; only the first invocation takes effect.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        decimals_to_str,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                component_from_record,
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )
    cart_logger = logging.getLogger(CART_LOGGER_NAME)
    cart_logger.handlers.clear()
    cart_logger.addHandler(handler)
    cart_logger.setLevel(level.upper() if isinstance(level, str) else level)
    cart_logger.propagate = False


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger(CART_LOGGER_NAME).bind(context_component=component)


def _select_renderer() -> Any:
    """JSON when LOG_FORMAT=json or APP_ENV is a deployed environment, console otherwise."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if not log_format:
        env = os.environ.get("APP_ENV", "local").lower()
        log_format = "json" if env in _JSON_ENVIRONMENTS else "console"
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
