"""Middleware modules for the application."""

from flowtrack.middleware.correlation import CorrelationIdMiddleware

__all__ = [
    "CorrelationIdMiddleware",
]
