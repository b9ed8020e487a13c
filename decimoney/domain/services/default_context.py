import threading
from collections.abc import Mapping
from typing import Optional

from decimoney.domain.values.numeric_context import (
    DECIMAL64,
    CanonicalWidth,
    NumericContext,
    RoundingPolicy,
)
from decimoney.shared.logging import get_logger

logger = get_logger(__name__)

_lock = threading.Lock()
_default_context: Optional[NumericContext] = None


def resolve_default_context(
    config: Optional[Mapping[str, str]] = None,
) -> NumericContext:
    """
    Resolve the default numeric context from configuration.

    An explicit precision wins (rounding defaults to HALF_UP), then a named
    canonical width, then DECIMAL64. Any configuration error falls back to
    DECIMAL64 and is logged, never raised.

    :param config: Configuration keys and values; settings from the
        environment are used when omitted
    :return: Resolved NumericContext
    """
    from decimoney.shared.config import Settings, get_settings

    try:
        if config is None:
            settings = get_settings()
        else:
            settings = Settings.model_validate(dict(config))

        if settings.MONEY_DEFAULTS_PRECISION is not None:
            rounding = RoundingPolicy.HALF_UP
            if settings.MONEY_DEFAULTS_ROUNDING_MODE is not None:
                rounding = RoundingPolicy.parse(
                    settings.MONEY_DEFAULTS_ROUNDING_MODE
                )

            context = NumericContext(
                precision=settings.MONEY_DEFAULTS_PRECISION, rounding=rounding
            )
            logger.info(
                "default_context_resolved",
                source="precision",
                precision=context.precision,
                rounding=context.rounding.value,
            )
            return context

        if settings.MONEY_DEFAULTS_MATH_CONTEXT is not None:
            width = CanonicalWidth.parse(settings.MONEY_DEFAULTS_MATH_CONTEXT)
            logger.info(
                "default_context_resolved", source="math_context", width=width.value
            )
            return width.context()

        logger.info("default_context_resolved", source="default", width="DECIMAL64")
        return DECIMAL64

    except Exception as e:
        logger.error(
            "default_context_resolution_failed",
            fallback="DECIMAL64",
            error=str(e),
            exc_info=True,
        )
        return DECIMAL64


def get_default_context() -> NumericContext:
    """Process-wide default context, resolved on first use only."""
    global _default_context

    context = _default_context
    if context is not None:
        return context

    with _lock:
        if _default_context is None:
            _default_context = resolve_default_context()
        return _default_context


def reset_default_context() -> None:
    global _default_context

    with _lock:
        _default_context = None
