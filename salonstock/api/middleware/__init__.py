"""API middleware."""

from salonstock.api.middleware.error_handler import ErrorHandlerMiddleware
from salonstock.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
