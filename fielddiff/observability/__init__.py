"""Observability helpers for fielddiff.

Submodules:
    logging -- structlog setup and component-bound logger factory.
"""

from fielddiff.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
