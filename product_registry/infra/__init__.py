"""Infrastructure module - logging."""

from product_registry.infra.logging import caller_context, get_logger, setup_logging

__all__ = ["caller_context", "get_logger", "setup_logging"]
